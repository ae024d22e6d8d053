"""Local configuration for akafoe_menu."""

from __future__ import annotations

import os


DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "akafoe-menu/0.1"
DEFAULT_LOG_LEVEL = "WARNING"

AKAFOE_MENU_FETCH_TIMEOUT_S = float(os.getenv("AKAFOE_MENU_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
AKAFOE_MENU_FETCH_MAX_RETRIES = int(os.getenv("AKAFOE_MENU_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
AKAFOE_MENU_FETCH_BACKOFF_S = float(os.getenv("AKAFOE_MENU_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
AKAFOE_MENU_USER_AGENT = os.getenv("AKAFOE_MENU_USER_AGENT", DEFAULT_USER_AGENT)
AKAFOE_MENU_LOG_LEVEL = os.getenv("AKAFOE_MENU_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
