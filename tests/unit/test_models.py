"""Unit tests for core domain models.

These tests verify schema defaults and the derived accessors on
MagmaConfig and the compiler options variants. They are pure unit tests
with no I/O dependencies.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from magma_config.core.models import (
    CodegenOptions,
    CompilerKind,
    EsbuildOptions,
    MagmaConfig,
    SwcOptions,
)


class TestMagmaConfigDefaults:
    """Tests for a freshly constructed MagmaConfig."""

    @pytest.mark.core
    def test_default_compiler_is_esbuild(self) -> None:
        """esbuild is the default backend."""
        assert MagmaConfig().compiler is CompilerKind.ESBUILD

    @pytest.mark.core
    def test_default_optional_fields(self) -> None:
        """Metadata and options blocks start unset."""
        config = MagmaConfig()

        assert config.name is None
        assert config.version is None
        assert config.esbuild is None
        assert config.swc is None
        assert config.node_modules_dir == ".magma/node_modules"

    @pytest.mark.core
    def test_default_codegen(self) -> None:
        """codegen is always populated with its defaults."""
        codegen = MagmaConfig().codegen

        assert codegen.output_folder == ".magma/obj/generated"
        assert codegen.typescript_output == ".magma/obj/ts"
        assert codegen.other_outputs is None

    @pytest.mark.core
    def test_codegen_not_shared_between_instances(self) -> None:
        """Each config owns its own CodegenOptions."""
        first = MagmaConfig()
        second = MagmaConfig()

        first.codegen.output_folder = "gen"

        assert second.codegen.output_folder == ".magma/obj/generated"


class TestCompilerOptionsDefaults:
    """Tests for the compiler options variants."""

    @pytest.mark.core
    def test_esbuild_defaults(self) -> None:
        """EsbuildOptions carries the esbuild defaults."""
        options = EsbuildOptions()

        assert options.entry_points == []
        assert options.out_dir == "dist/scripts"
        assert options.bundle is True
        assert options.minify is True
        assert options.target == "es2022"
        assert options.source_map is False

    @pytest.mark.core
    def test_swc_defaults(self) -> None:
        """SwcOptions carries the SWC defaults."""
        options = SwcOptions()

        assert options.entry_points == []
        assert options.out_dir == "dist/scripts"
        assert options.jsc_target == "es2022"
        assert options.minify is True
        assert options.source_maps is False
        assert options.module_commonjs is False

    @pytest.mark.core
    def test_variants_are_tagged(self) -> None:
        """Each variant names the compiler it belongs to."""
        assert EsbuildOptions.kind is CompilerKind.ESBUILD
        assert SwcOptions().kind is CompilerKind.SWC

    @pytest.mark.core
    def test_entry_points_not_shared(self) -> None:
        """Entry point lists are per instance."""
        first = EsbuildOptions()
        first.entry_points.append("src/main.ts")

        assert EsbuildOptions().entry_points == []

    @pytest.mark.core
    def test_get_out_dir_resolves_against_root(self, tmp_path: Path) -> None:
        """get_out_dir() joins outdir onto the project root."""
        options = SwcOptions(out_dir="build/js")

        assert options.get_out_dir(tmp_path) == tmp_path / "build" / "js"

    @pytest.mark.core
    def test_get_out_dir_falls_back_when_unset(self, tmp_path: Path) -> None:
        """A None outdir resolves to the default dist/scripts."""
        options = EsbuildOptions(out_dir=None)

        assert options.get_out_dir(tmp_path) == tmp_path / "dist" / "scripts"


class TestActiveCompilerOptions:
    """Tests for MagmaConfig.get_active_compiler_options()."""

    @pytest.mark.core
    def test_returns_esbuild_block(self) -> None:
        """compiler=esbuild selects the esbuild block."""
        esbuild = EsbuildOptions(entry_points=["src/index.ts"])
        config = MagmaConfig(esbuild=esbuild, swc=SwcOptions())

        assert config.get_active_compiler_options() is esbuild

    @pytest.mark.core
    def test_returns_swc_block(self) -> None:
        """compiler=swc selects the swc block and ignores esbuild."""
        swc = SwcOptions()
        config = MagmaConfig(
            compiler=CompilerKind.SWC, esbuild=EsbuildOptions(), swc=swc
        )

        assert config.get_active_compiler_options() is swc

    @pytest.mark.core
    def test_returns_none_when_selected_block_missing(self) -> None:
        """A selected compiler without options is not an error."""
        config = MagmaConfig(compiler=CompilerKind.SWC, esbuild=EsbuildOptions())

        assert config.get_active_compiler_options() is None

    @pytest.mark.core
    def test_inactive_block_is_kept(self) -> None:
        """Selecting a compiler does not clear the other block."""
        esbuild = EsbuildOptions()
        config = MagmaConfig(compiler=CompilerKind.SWC, esbuild=esbuild)

        config.get_active_compiler_options()

        assert config.esbuild is esbuild


class TestOutputRoots:
    """Tests for the path accessors on MagmaConfig."""

    @pytest.mark.core
    def test_generated_root_default(self, tmp_path: Path) -> None:
        """The generated root defaults to .magma/obj/generated."""
        result = MagmaConfig().get_generated_root(tmp_path)

        assert result == tmp_path / ".magma" / "obj" / "generated"

    @pytest.mark.core
    def test_typescript_root_default(self, tmp_path: Path) -> None:
        """The TypeScript root defaults to .magma/obj/ts."""
        result = MagmaConfig().get_typescript_output_root(tmp_path)

        assert result == tmp_path / ".magma" / "obj" / "ts"

    @pytest.mark.core
    def test_custom_output_folder(self, tmp_path: Path) -> None:
        """A configured output folder is resolved against the root."""
        config = MagmaConfig(codegen=CodegenOptions(output_folder="gen\\code"))

        assert config.get_generated_root(tmp_path) == tmp_path / "gen" / "code"

    @pytest.mark.core
    def test_null_output_folder_falls_back_to_default(self, tmp_path: Path) -> None:
        """An explicit None is treated as not set."""
        config = MagmaConfig(
            codegen=CodegenOptions(output_folder=None, typescript_output=None)
        )

        assert config.get_generated_root(tmp_path) == (
            tmp_path / ".magma" / "obj" / "generated"
        )
        assert config.get_typescript_output_root(tmp_path) == (
            tmp_path / ".magma" / "obj" / "ts"
        )

    @pytest.mark.core
    def test_empty_output_folder_is_project_root(self, tmp_path: Path) -> None:
        """An empty string is a value, and resolves to the root itself."""
        config = MagmaConfig(codegen=CodegenOptions(output_folder=""))

        assert config.get_generated_root(tmp_path) == tmp_path

    @pytest.mark.core
    def test_absolute_output_folder(self, tmp_path: Path) -> None:
        """Absolute output folders ignore the project root."""
        elsewhere = tmp_path / "shared" / "gen"
        config = MagmaConfig(codegen=CodegenOptions(output_folder=str(elsewhere)))

        assert config.get_generated_root(tmp_path / "proj") == elsewhere

    @pytest.mark.core
    def test_other_output_roots(self, tmp_path: Path) -> None:
        """Each named output is resolved against the project root."""
        config = MagmaConfig(
            codegen=CodegenOptions(
                other_outputs={"docs": "out/docs", "schemas": "out\\schemas"}
            )
        )

        assert config.get_other_output_roots(tmp_path) == {
            "docs": tmp_path / "out" / "docs",
            "schemas": tmp_path / "out" / "schemas",
        }

    @pytest.mark.core
    def test_other_output_roots_empty_when_unset(self, tmp_path: Path) -> None:
        """No other outputs yields an empty mapping."""
        assert MagmaConfig().get_other_output_roots(tmp_path) == {}

    @pytest.mark.core
    def test_node_modules_dir(self, tmp_path: Path) -> None:
        """node_modules resolves against the project root."""
        result = MagmaConfig().get_node_modules_dir(tmp_path)

        assert result == tmp_path / ".magma" / "node_modules"

    @pytest.mark.core
    def test_accessors_do_not_mutate(self, tmp_path: Path) -> None:
        """Deriving paths leaves the config untouched."""
        config = MagmaConfig(codegen=CodegenOptions(output_folder=None))
        before = repr(config)

        config.get_generated_root(tmp_path)
        config.get_typescript_output_root(tmp_path)
        config.get_other_output_roots(tmp_path)

        assert repr(config) == before
