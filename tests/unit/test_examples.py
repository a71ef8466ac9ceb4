"""Tests validating that example code patterns work correctly.

These tests ensure the examples in the examples/ directory represent
working, copy-pasteable code patterns.
"""

from pathlib import Path

import pytest

from magma_config import (
    CodegenOptions,
    CompilerKind,
    ConfigNotFoundError,
    EsbuildOptions,
    InvalidConfigurationError,
    MagmaConfig,
    load,
    open_project,
    resolve_compiler,
    save,
    try_find,
    try_load,
)


@pytest.mark.core
class TestBasicUsage:
    """Tests for basic_usage.py example pattern."""

    def test_save_load_and_resolve(self, tmp_path: Path) -> None:
        """A saved config loads back and resolves its outputs."""
        project_root = tmp_path / "my-game"
        project_root.mkdir()
        config_path = project_root / "magma.json"

        save(
            MagmaConfig(
                name="my-game",
                codegen=CodegenOptions(other_outputs={"schemas": "out/schemas"}),
                esbuild=EsbuildOptions(entry_points=["src/main.ts"], minify=False),
            ),
            config_path,
        )
        config = load(config_path)

        kind, options = resolve_compiler(config)
        assert kind is CompilerKind.ESBUILD
        assert options is not None
        assert options.entry_points == ["src/main.ts"]
        assert options.get_out_dir(project_root) == project_root / "dist" / "scripts"
        assert config.get_other_output_roots(project_root) == {
            "schemas": project_root / "out" / "schemas"
        }


@pytest.mark.core
class TestProjectRootDiscovery:
    """Tests for project_root_discovery.py example pattern."""

    def test_discovery_from_subdirectory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """try_find() and open_project() work from a nested cwd."""
        (tmp_path / "magma.json").write_text('{"name": "my-game"}')
        nested = tmp_path / "src" / "systems"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert try_find(".") == tmp_path / "magma.json"

        project = open_project()
        assert project.project_root == tmp_path
        assert project.generated_root == tmp_path / ".magma" / "obj" / "generated"


@pytest.mark.core
class TestErrorHandling:
    """Tests for error_handling.py example patterns."""

    def test_try_load_reports_broken_file(self, tmp_path: Path) -> None:
        """Pattern 1: a broken file is reported without raising."""
        config_path = tmp_path / "magma.json"
        config_path.write_text("not json")

        config, ok, error = try_load(config_path)

        assert config is None
        assert not ok
        assert error

    def test_open_project_invalid_has_hint(self, tmp_path: Path) -> None:
        """Pattern 2: invalid configs raise with a recovery hint."""
        (tmp_path / "magma.json").write_text('{"compiler": "rollup"}')

        with pytest.raises(InvalidConfigurationError) as exc_info:
            open_project(tmp_path)

        assert "rollup" in str(exc_info.value)
        assert exc_info.value.recovery_hint is not None

    def test_not_found_error_has_hint(self) -> None:
        """Pattern 2: ConfigNotFoundError suggests running init."""
        err = ConfigNotFoundError(Path("/nowhere"))

        assert "init" in err.recovery_hint
