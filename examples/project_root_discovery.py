"""Project root discovery from any subdirectory.

This example shows how to find the nearest magma.json and resolve a
project without knowing where the script is run from.

The search starts in the given directory and walks up through its
parents, checking at most 50 directories. The closest magma.json wins.
"""

from magma_config import open_project, try_find


# Locate the config file (None if there is none)
config_path = try_find(".")
print(f"Config file: {config_path}")

# Or find, load and resolve in one step
project = open_project()
print(f"Project root: {project.project_root}")
print(f"Generated root: {project.generated_root}")

kind, options = project.compiler
print(f"Compiler: {kind} ({'configured' if options else 'no options block'})")
