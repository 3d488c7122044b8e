"""Compile options resolution.

Options are loaded from solbuild.yaml:
1. Explicit path argument
2. SOLBUILD_CONFIG environment variable
3. solbuild.yaml in the working directory
4. Defaults (no file)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from solbuild_core.errors import ConfigurationError
from solbuild_core.schemas import CompileOptions

logger = logging.getLogger(__name__)

# Environment variable pointing at an options file
CONFIG_ENV_VAR = "SOLBUILD_CONFIG"

# Standard options file name
CONFIG_FILE_NAME = "solbuild.yaml"


def find_config_file(search_dir: Path | None = None) -> Path | None:
    """Locate the options file.

    Args:
        search_dir: Directory searched for solbuild.yaml. Defaults to the
            working directory.

    Returns:
        Path to the options file, or None when there is none.

    Raises:
        ConfigurationError: If SOLBUILD_CONFIG names a missing file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        if not path.exists():
            raise ConfigurationError(
                f"{CONFIG_ENV_VAR} points to a missing file",
                file_path=env_path,
            )
        return path

    candidate = (search_dir or Path.cwd()) / CONFIG_FILE_NAME
    if candidate.exists():
        logger.debug("Found %s at %s", CONFIG_FILE_NAME, candidate)
        return candidate

    return None


def resolve_options(path: Path | str | None = None) -> CompileOptions:
    """Load compile options from file, or fall back to defaults.

    Args:
        path: Explicit options file. If None, discovered via
            find_config_file().

    Returns:
        Validated CompileOptions.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, or
            fails validation.
    """
    config_path = Path(path) if path is not None else find_config_file()

    if config_path is None:
        logger.debug("No %s found, using default options", CONFIG_FILE_NAME)
        return CompileOptions()

    try:
        return CompileOptions.from_yaml(config_path)
    except FileNotFoundError as e:
        raise ConfigurationError("Options file not found", file_path=str(config_path)) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Options file is not valid YAML",
            file_path=str(config_path),
            internal_details=str(e),
        ) from e
    except ValidationError as e:
        first = e.errors()[0]
        raise ConfigurationError(
            f"Invalid options: {first['msg']}",
            file_path=str(config_path),
            field_path=".".join(str(part) for part in first["loc"]),
            internal_details=str(e),
        ) from e
