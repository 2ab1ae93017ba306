#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants shared across the minigrep package."""

# Environment toggle: presence (any value) switches to case-insensitive search
CASE_INSENSITIVE_ENV_VAR = "CASE_INSENSITIVE"

# Ambient settings
CONFIG_ENV_VAR = "MINIGREP_CONFIG"
LOG_LEVEL_ENV_VAR = "MINIGREP_LOG_LEVEL"
LOG_FILE_ENV_VAR = "MINIGREP_LOG_FILE"
TRACE_ENV_VAR = "MINIGREP_TRACE"

DEFAULT_LOG_LEVEL = "WARNING"
TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})

CONFIG_DOTFILES = [".minigrep.toml", ".minigrep.yaml", ".minigrep.yml", ".minigrep.json"]
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TOOL_SECTION = "minigrep"

# Minimum argv length: program name, query, filename
MIN_ARGUMENTS = 3

TEXT_ENCODING = "utf-8"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
