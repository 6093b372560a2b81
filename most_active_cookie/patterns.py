"""Most Active Cookie - Constants and patterns"""

import re

VERSION = "1.0.0"

# Command line flags
FILE_FLAG = "-f"
DATE_FLAG = "-d"
EXPECTED_ARG_COUNT = 4

USAGE_MESSAGE = "Usage: -f <filename> -d <date>"
UNKNOWN_ARGUMENT_MESSAGE = "Unknown argument: {token}"
MISSING_VALUE_MESSAGE = "Both -f and -d arguments must be provided"

# Cookie log layout
HEADER_LINES = 1
FIELD_SEPARATOR = ","
DATE_PREFIX_LENGTH = 10

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Exit codes
EXIT_OK = 0
EXIT_FILE_ERROR = 1
EXIT_USAGE_ERROR = 2
