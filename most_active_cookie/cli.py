"""Most Active Cookie - Command line entry point"""

import sys
from typing import Optional, Sequence

from .analyzer import CookieAnalyzer
from .log import setup_logger
from .output import print_cookies, print_error
from .patterns import DATE_PATTERN, EXIT_FILE_ERROR, EXIT_OK, EXIT_USAGE_ERROR
from .arguments import check_arguments


def main(argv: Optional[Sequence[str]] = None, verbose: bool = False) -> int:
    """Print the most active cookies of ``-f <file>`` on ``-d <date>``.

    Returns 0 on success, 2 on an argument error and 1 when the file
    cannot be read.
    """
    logger = setup_logger("most_active_cookie", verbose)
    argv = sys.argv[1:] if argv is None else list(argv)

    result = check_arguments(argv)
    if not result.ok:
        print_error(result.error.message)
        return EXIT_USAGE_ERROR

    args = result.arguments
    if not DATE_PATTERN.match(args.date):
        logger.warning("Date %r is not in YYYY-MM-DD form; no entries are likely to match", args.date)

    analyzer = CookieAnalyzer()
    try:
        most_active = analyzer.analyze_file(args.file_path, args.date)
    except OSError as e:
        print_error(f"Error: {e}")
        return EXIT_FILE_ERROR

    print_cookies(most_active)
    return EXIT_OK
