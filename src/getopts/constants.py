"""Centralized constants for getopts."""

from __future__ import annotations

# Names
NAME_PATTERN = r"^[a-zA-Z][a-zA-Z0-9_-]*[a-zA-Z0-9]$"
OPTION_TOKEN_PATTERN = r"^(-+)(.*)$"
MAX_OPTION_PREFIX_LEN = 2
LONG_PREFIX = "--"
SHORT_PREFIX = "-"

# Implicit options
HELP_OPTION_NAME = "help"
HELP_OPTION_ALIAS = "h"
HELP_OPTION_HELP = "show this help message and exit"
VERSION_OPTION_NAME = "version"
VERSION_OPTION_ALIAS = "v"
VERSION_OPTION_HELP = "show version and exit"
IMPLICIT_OPTION_NAMES = frozenset({HELP_OPTION_NAME, VERSION_OPTION_NAME})

# Value coercion
TRUE_LITERALS = frozenset({"true", "yes", "y"})
FALSE_LITERALS = frozenset({"false", "no", "n"})
DECIMAL_NUMBER_PATTERN = r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$"
HEX_NUMBER_PATTERN = r"^[+-]?0[xX][0-9a-fA-F]+$"
INTEGER_PATTERN = r"^[+-]?\d+$"

# Layout
MAX_COLUMNS = 76
USAGE_INDENT = "  "
OPTION_INDENT = "  "
OPTION_SPEC_GUTTER = 2
HELP_DELIMITER = "  : "
USAGE_HEADER = "Usage:"
OPTIONS_HEADER = "Options:"
ANY_PARAMS_TOKEN = "..."
DEFAULT_ANNOTATION_TEMPLATE = "{help} (default: {value})"
SUMMARY_TEMPLATE = "{name} - {summary}"
VERSION_LINE_TEMPLATE = "Version: {version}"

# Exit statuses
EXIT_OK = 0
EXIT_USAGE_ERROR = 1

# Usage error messages
MSG_UNKNOWN_OPTION = "unknown option: {token}"
MSG_TOO_MANY_PARAMETERS = "too many parameters"
MSG_VALUE_NOT_SPECIFIED = "option {token} value is not specified"
MSG_VALUE_NOT_NUMBER = "option {token} value {value} is not number"
MSG_VALUE_NOT_BOOLEAN = "option {token} value {value} is not boolean"
MSG_SPECIFIED_TWICE = "option {token} is specified twice"
MSG_REQUIRED_OPTION = "required option: {token} is not specified"
MSG_PARAMS_REQUIRED = "parameters must be specified at least {count} required"
