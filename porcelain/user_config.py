"""Repository configuration for porcelain.

Handles reading and writing the .porcelain/config.yaml file in each repository:
- ignore_file: Ignore file consulted for untracked files (relative to the repo root)
- ignore: Extra gitignore-style patterns applied on top of the ignore file
- show_untracked: Whether the status report lists untracked files
"""

import copy
from pathlib import Path

import structlog
import yaml

logger = structlog.get_logger()

CONFIG_DIR_NAME = ".porcelain"

# Default configuration values
DEFAULT_CONFIG = {
    "ignore_file": ".gitignore",
    "ignore": [],
    "show_untracked": True,
}


def get_config_dir(repo_root: Path) -> Path:
    """Get the repository config directory.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .porcelain/
    """
    return repo_root / CONFIG_DIR_NAME


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .porcelain/config.yaml
    """
    return get_config_dir(repo_root) / "config.yaml"


def default_config() -> dict:
    """Return a fresh copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(repo_root: Path) -> dict:
    """Load the porcelain configuration from config.yaml.

    Reading never creates the file; a missing or corrupted file yields the
    defaults.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        return default_config()

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("config_unreadable", path=str(config_file), error=str(e))
        return default_config()

    if not isinstance(config, dict):
        logger.warning("config_not_a_mapping", path=str(config_file))
        return default_config()

    # Merge with defaults for any missing keys
    for key, value in default_config().items():
        if key not in config:
            config[key] = value
    return config


def save_config(repo_root: Path, config: dict) -> None:
    """Save the configuration to config.yaml.

    Args:
        repo_root: The root directory of the git repository.
        config: Configuration dictionary to save.
    """
    config_file = get_config_file(repo_root)

    # Ensure directory exists
    config_file.parent.mkdir(exist_ok=True)

    with open(config_file, "w") as f:
        yaml.dump(
            config,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


def get_ignore_patterns(repo_root: Path) -> list[str]:
    """Get the list of extra ignore patterns from config.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        List of gitignore-style patterns.
    """
    config = load_config(repo_root)
    return list(config.get("ignore") or [])


def add_ignore_pattern(repo_root: Path, pattern: str) -> None:
    """Add a pattern to the ignore list.

    Args:
        repo_root: The root directory of the git repository.
        pattern: Pattern to add (e.g., "*.log", "build/").
    """
    config = load_config(repo_root)
    if not config.get("ignore"):
        config["ignore"] = []
    if pattern not in config["ignore"]:
        config["ignore"].append(pattern)
        save_config(repo_root, config)


def remove_ignore_pattern(repo_root: Path, pattern: str) -> bool:
    """Remove a pattern from the ignore list.

    Args:
        repo_root: The root directory of the git repository.
        pattern: Pattern to remove.

    Returns:
        True if pattern was found and removed, False otherwise.
    """
    config = load_config(repo_root)
    if config.get("ignore") and pattern in config["ignore"]:
        config["ignore"].remove(pattern)
        save_config(repo_root, config)
        return True
    return False
