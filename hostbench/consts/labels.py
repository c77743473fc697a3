"""Operation labels as they appear in the timing lines."""

SQRT = "Square root execution"
WRITE = "Write execution"
READ = "Read execution"
FILE_CLEANUP = "Temp file cleanup"

DB_OPEN = "Database open"
SCHEMA = "Schema creation"
INSERT = "Data insertion"
DB_CLOSE = "Database close"

TOTAL = "Total benchmark"
