from linesorter.core.models import SortMode

SORT_MODE_ALIASES = {
    "lexicographic": SortMode.LEXICOGRAPHIC,
    "lex": SortMode.LEXICOGRAPHIC,
    "integer": SortMode.INTEGER,
    "int": SortMode.INTEGER,
    "decimal-comma": SortMode.DECIMAL_COMMA,
    "comma": SortMode.DECIMAL_COMMA,
    "decimal-dot": SortMode.DECIMAL_DOT,
    "dot": SortMode.DECIMAL_DOT,
}

SORT_MODE_CHOICES = list(SORT_MODE_ALIASES.keys())

SORT_MODE_HELP_TEXT = (
    "Ordering of the lines:\n"
    "  lexicographic, lex : Plain text order (no trimming, case-sensitive)\n"
    "  integer, int       : Leading integer of each line, e.g. '-12 apples'\n"
    "  decimal-comma      : Leading decimal with comma separator, e.g. '3,75'\n"
    "  decimal-dot        : Leading decimal with dot separator, e.g. '3.75'\n"
    "Blank lines go first (ascending) or last (descending) in numeric modes.\n"
    "Example:\n"
    "  %(prog)s prices.txt --mode comma --descending"
)

EPILOG_TEXT = """
Examples:
  Sort a file alphabetically and print the result
  %(prog)s names.txt

  Sort numbers read from standard input, biggest first
  cat sizes.txt | %(prog)s --mode int -d

  Sort a file in place (the previous version is moved to trash)
  %(prog)s measurements.txt --mode dot --in-place

  Same as above but without keeping a backup in trash
  %(prog)s measurements.txt --mode dot --in-place --no-backup
"""
