"""Runtime configuration for wardist.

Settings come from module constants with environment variable overrides:
- WARDIST_BUILD_FILE: build file name or path (default: wardist.yaml)
- WARDIST_BUILD_DIR: build output directory, overrides build_dir in the file
"""

from __future__ import annotations

import os
from pathlib import Path

# Environment variable for the build file location
BUILD_FILE_ENV_VAR = "WARDIST_BUILD_FILE"

# Environment variable overriding the build output directory
BUILD_DIR_ENV_VAR = "WARDIST_BUILD_DIR"

# Standard build file name
BUILD_FILE_NAME = "wardist.yaml"

# Default build output directory, relative to the project root
DEFAULT_BUILD_DIR = "build"


def get_build_file() -> Path:
    """Get the build file path from the environment.

    Returns:
        Path from WARDIST_BUILD_FILE, or wardist.yaml in the working directory.
    """
    return Path(os.environ.get(BUILD_FILE_ENV_VAR, BUILD_FILE_NAME))


def get_build_dir_override() -> str | None:
    """Get the build directory override from the environment.

    Returns:
        Value of WARDIST_BUILD_DIR, or None when unset or empty.
    """
    return os.environ.get(BUILD_DIR_ENV_VAR) or None
