"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "awx-reconciler"
APP_AUTHOR = "awx-reconciler"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_HOST = "AWX_HOST"
ENV_TOKEN = "AWX_TOKEN"
ENV_PROFILE = "AWX_PROFILE"

# API defaults
DEFAULT_API_BASE = "/api/v2"
DEFAULT_TIMEOUT = 30.0
DEFAULT_PAGE_SIZE = 100
