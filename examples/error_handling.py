"""Error handling patterns with recovery hints.

This example demonstrates the two ways to load a config: the try_*
functions that report failure as data, and the fail-fast helpers that
raise exceptions with a recovery_hint.
"""

from pathlib import Path

from magma_config import (
    ConfigNotFoundError,
    InvalidConfigurationError,
    MagmaConfig,
    MagmaConfigError,
    open_project,
    try_find,
    try_load,
)


# Pattern 1: Treat a missing or broken config as optional
def load_or_default(start: Path) -> MagmaConfig:
    """Load the nearest config, falling back to defaults."""
    config_path = try_find(start)
    if config_path is None:
        return MagmaConfig()

    config, ok, error = try_load(config_path)
    if not ok or config is None:
        print(f"Ignoring {config_path}: {error}")
        return MagmaConfig()
    return config


# Pattern 2: Require a config and explain what went wrong
def require_project(start: Path) -> None:
    """Resolve the nearest project or print guidance."""
    try:
        project = open_project(start)
    except ConfigNotFoundError as e:
        print(f"No project found from {e.start}")
        print(f"Hint: {e.recovery_hint}")
        raise
    except InvalidConfigurationError as e:
        print(f"Broken config: {e}")
        print(f"Hint: {e.recovery_hint}")
        raise
    print(f"Building {project.config.name} in {project.project_root}")


# Pattern 3: Catch-all for any library error
def describe(start: Path) -> str:
    """Describe the nearest project, or the error that prevented it."""
    try:
        project = open_project(start)
    except MagmaConfigError as e:
        return f"unavailable ({e})"
    return f"{project.config.name} using {project.compiler.kind}"


print(load_or_default(Path(".")))
print(describe(Path(".")))
