"""Process exit codes used by the gridquery CLI."""

SUCCESS = 0
GENERAL_ERROR = 1
USAGE_ERROR = 2
SCHEMA_ERROR = 3
DOCUMENT_ERROR = 4
DROPPED_SEGMENTS = 5
