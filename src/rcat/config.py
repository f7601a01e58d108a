# src/rcat/config.py

PROG_NAME = "rcat"

USAGE = "%(prog)s [OPTIONS] [PATH ...]"

DESCRIPTION = "A simple cat program: concatenate files to standard output."

EPILOG = """\
examples:
  rcat --help
  rcat /path/to/file1 /path/to/file2 ...
"""

# Read size for streaming file content
CHUNK_SIZE = 64 * 1024

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
