"""JSON codec for magma.json.

Converts between the JSON document and the dataclasses in
magma_config.core.models. Absent keys take the schema default, explicit
nulls are kept as None, and unknown keys are ignored. Values of the wrong
JSON type raise ConfigSchemaError naming the dotted key path.
"""

from __future__ import annotations

import json
from typing import Any

from magma_config.constants import (
    DEFAULT_BUNDLE,
    DEFAULT_MINIFY,
    DEFAULT_MODULE_COMMONJS,
    DEFAULT_NODE_MODULES_DIR,
    DEFAULT_OUT_DIR,
    DEFAULT_OUTPUT_FOLDER,
    DEFAULT_SOURCE_MAP,
    DEFAULT_TARGET,
    DEFAULT_TYPESCRIPT_OUTPUT,
)
from magma_config.core.exceptions import ConfigSchemaError
from magma_config.core.models import (
    CodegenOptions,
    CompilerKind,
    EsbuildOptions,
    MagmaConfig,
    SwcOptions,
)


_JSON_INDENT = 2


def _json_type(value: object) -> str:
    """Name the JSON type of a decoded value for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _key_path(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def _mismatch(path: str, expected: str, value: object) -> ConfigSchemaError:
    return ConfigSchemaError(
        f"Expected {expected} for '{path}', got {_json_type(value)}", key=path
    )


def _get_str(
    data: dict[str, Any], key: str, default: str | None, prefix: str = ""
) -> str | None:
    if key not in data:
        return default
    value = data[key]
    if value is None or isinstance(value, str):
        return value
    raise _mismatch(_key_path(prefix, key), "a string", value)


def _get_bool(
    data: dict[str, Any], key: str, default: bool | None, prefix: str = ""
) -> bool | None:
    if key not in data:
        return default
    value = data[key]
    if value is None or isinstance(value, bool):
        return value
    raise _mismatch(_key_path(prefix, key), "a boolean", value)


def _get_str_list(data: dict[str, Any], key: str, prefix: str = "") -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    path = _key_path(prefix, key)
    if not isinstance(value, list):
        raise _mismatch(path, "an array of strings", value)
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise _mismatch(f"{path}[{index}]", "a string", item)
    return list(value)


def _get_str_map(
    data: dict[str, Any], key: str, prefix: str = ""
) -> dict[str, str] | None:
    value = data.get(key)
    if value is None:
        return None
    path = _key_path(prefix, key)
    if not isinstance(value, dict):
        raise _mismatch(path, "an object", value)
    for name, item in value.items():
        if not isinstance(item, str):
            raise _mismatch(f"{path}.{name}", "a string", item)
    return dict(value)


def _get_object(data: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None or isinstance(value, dict):
        return value
    raise _mismatch(key, "an object", value)


def _get_compiler(data: dict[str, Any]) -> CompilerKind:
    if "compiler" not in data:
        return CompilerKind.ESBUILD
    value = data["compiler"]
    kinds = list(CompilerKind)
    # Integers index the kinds in declaration order
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value < len(kinds):
            return kinds[value]
        raise ConfigSchemaError(
            f"Unknown compiler index {value} (expected 0 to {len(kinds) - 1})",
            key="compiler",
        )
    if not isinstance(value, str):
        raise _mismatch("compiler", "a compiler name", value)
    try:
        return CompilerKind(value.lower())
    except ValueError:
        choices = ", ".join(kind.value for kind in CompilerKind)
        raise ConfigSchemaError(
            f"Unknown compiler '{value}' (expected one of: {choices})",
            key="compiler",
        ) from None


def esbuild_from_dict(data: dict[str, Any]) -> EsbuildOptions:
    """Build EsbuildOptions from the "esbuild" JSON object."""
    return EsbuildOptions(
        entry_points=_get_str_list(data, "entryPoints", "esbuild"),
        out_dir=_get_str(data, "outdir", DEFAULT_OUT_DIR, "esbuild"),
        bundle=_get_bool(data, "bundle", DEFAULT_BUNDLE, "esbuild"),
        minify=_get_bool(data, "minify", DEFAULT_MINIFY, "esbuild"),
        target=_get_str(data, "target", DEFAULT_TARGET, "esbuild"),
        source_map=_get_bool(data, "sourcemap", DEFAULT_SOURCE_MAP, "esbuild"),
    )


def swc_from_dict(data: dict[str, Any]) -> SwcOptions:
    """Build SwcOptions from the "swc" JSON object."""
    return SwcOptions(
        entry_points=_get_str_list(data, "entryPoints", "swc"),
        out_dir=_get_str(data, "outdir", DEFAULT_OUT_DIR, "swc"),
        jsc_target=_get_str(data, "jscTarget", DEFAULT_TARGET, "swc"),
        minify=_get_bool(data, "minify", DEFAULT_MINIFY, "swc"),
        source_maps=_get_bool(data, "sourceMaps", DEFAULT_SOURCE_MAP, "swc"),
        module_commonjs=_get_bool(
            data, "moduleCommonJs", DEFAULT_MODULE_COMMONJS, "swc"
        ),
    )


def codegen_from_dict(data: dict[str, Any]) -> CodegenOptions:
    """Build CodegenOptions from the "codegen" JSON object."""
    return CodegenOptions(
        output_folder=_get_str(data, "outputFolder", DEFAULT_OUTPUT_FOLDER, "codegen"),
        typescript_output=_get_str(
            data, "typescriptOutput", DEFAULT_TYPESCRIPT_OUTPUT, "codegen"
        ),
        other_outputs=_get_str_map(data, "otherOutputs", "codegen"),
    )


def config_from_dict(data: object) -> MagmaConfig:
    """Build a MagmaConfig from a decoded JSON document.

    Args:
        data: The decoded top-level JSON value.

    Returns:
        A fully populated MagmaConfig.

    Raises:
        ConfigSchemaError: If the document does not fit the schema.
    """
    if not isinstance(data, dict):
        raise ConfigSchemaError(
            f"Expected a JSON object at the top level, got {_json_type(data)}"
        )

    codegen = _get_object(data, "codegen")
    esbuild = _get_object(data, "esbuild")
    swc = _get_object(data, "swc")

    return MagmaConfig(
        name=_get_str(data, "name", None),
        version=_get_str(data, "version", None),
        codegen=codegen_from_dict(codegen) if codegen is not None else CodegenOptions(),
        compiler=_get_compiler(data),
        esbuild=esbuild_from_dict(esbuild) if esbuild is not None else None,
        swc=swc_from_dict(swc) if swc is not None else None,
        node_modules_dir=_get_str(data, "nodeModulesDir", DEFAULT_NODE_MODULES_DIR),
    )


def esbuild_to_dict(options: EsbuildOptions) -> dict[str, Any]:
    """Convert EsbuildOptions to its JSON object."""
    return {
        "entryPoints": list(options.entry_points),
        "outdir": options.out_dir,
        "bundle": options.bundle,
        "minify": options.minify,
        "target": options.target,
        "sourcemap": options.source_map,
    }


def swc_to_dict(options: SwcOptions) -> dict[str, Any]:
    """Convert SwcOptions to its JSON object."""
    return {
        "entryPoints": list(options.entry_points),
        "outdir": options.out_dir,
        "jscTarget": options.jsc_target,
        "minify": options.minify,
        "sourceMaps": options.source_maps,
        "moduleCommonJs": options.module_commonjs,
    }


def codegen_to_dict(options: CodegenOptions) -> dict[str, Any]:
    """Convert CodegenOptions to its JSON object."""
    return {
        "outputFolder": options.output_folder,
        "typescriptOutput": options.typescript_output,
        "otherOutputs": (
            dict(options.other_outputs) if options.other_outputs is not None else None
        ),
    }


def config_to_dict(config: MagmaConfig) -> dict[str, Any]:
    """Convert a MagmaConfig to its JSON document.

    Every key is written, with unset optional values as None, so the
    document round-trips through config_from_dict() unchanged.
    """
    return {
        "name": config.name,
        "version": config.version,
        "codegen": codegen_to_dict(config.codegen),
        "compiler": CompilerKind(config.compiler).value,
        "esbuild": (
            esbuild_to_dict(config.esbuild) if config.esbuild is not None else None
        ),
        "swc": swc_to_dict(config.swc) if config.swc is not None else None,
        "nodeModulesDir": config.node_modules_dir,
    }


def from_json(text: str) -> MagmaConfig | None:
    """Parse magma.json text.

    Returns:
        The parsed config, or None if the document is JSON null.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON.
        ConfigSchemaError: If the JSON does not fit the schema.
    """
    data = json.loads(text)
    if data is None:
        return None
    return config_from_dict(data)


def to_json(config: MagmaConfig) -> str:
    """Serialize a config to indented magma.json text."""
    return json.dumps(config_to_dict(config), indent=_JSON_INDENT, ensure_ascii=False)
