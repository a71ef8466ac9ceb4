"""Basic usage of magma-config.

This example shows how to create a magma.json, load it back and hand the
resolved locations to a build step.
"""

from pathlib import Path

from magma_config import (
    CodegenOptions,
    EsbuildOptions,
    MagmaConfig,
    load,
    resolve_compiler,
    save,
)


project_root = Path("./my-game")
project_root.mkdir(exist_ok=True)
config_path = project_root / "magma.json"

# Describe the project and save it
config = MagmaConfig(
    name="my-game",
    version="0.1.0",
    codegen=CodegenOptions(other_outputs={"schemas": "out/schemas"}),
    esbuild=EsbuildOptions(entry_points=["src/main.ts"], minify=False),
)
save(config, config_path)

# Load it back (raises InvalidConfigurationError if the file is broken)
config = load(config_path)

# Ask which compiler to run and with which options
kind, options = resolve_compiler(config)
print(f"Compiler: {kind}")
if options is not None:
    print(f"Entry points: {options.entry_points}")
    print(f"Output: {options.get_out_dir(project_root)}")

# Output locations are absolute, resolved against the project root
print(f"Generated code: {config.get_generated_root(project_root)}")
print(f"TypeScript: {config.get_typescript_output_root(project_root)}")
for name, path in config.get_other_output_roots(project_root).items():
    print(f"{name}: {path}")
