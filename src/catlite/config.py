# src/catlite/config.py

OPTION_PREFIX = "-"

NUMBER_OPTIONS = ("-n", "--number")
NUMBER_NONBLANK_OPTIONS = ("-b", "--number-nonblank")
HELP_OPTIONS = ("-h", "--help")

VALID_OPTIONS = frozenset(NUMBER_OPTIONS + NUMBER_NONBLANK_OPTIONS + HELP_OPTIONS)

# Line labels start here and restart for every file
START_LINE_NUMBER = 0

FILE_ENCODING = "utf-8"
# Undecodable bytes survive the round trip to stdout unchanged
DECODE_ERRORS = "surrogateescape"

HELP_TEXT = """Prints files to stdout.
Usage: cat [OPTION].. [FILE].. 

Options:
-n, --number                Prefix each line in the output with its line number.
-b, --number-nonblank       Prefix each nonempty line in the output with its line number. Overrides -n
"""
