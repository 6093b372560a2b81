"""Most Active Cookie package"""

from .patterns import VERSION
from .models import Arguments, CookieEntry, ParseResult
from .errors import ArgumentError, MissingValueError, UnknownArgumentError, UsageError
from .arguments import check_arguments, parse_arguments
from .analyzer import CookieAnalyzer
from .output import print_cookies, print_error

__all__ = [
    'VERSION', 'Arguments', 'CookieEntry', 'ParseResult',
    'ArgumentError', 'UsageError', 'UnknownArgumentError', 'MissingValueError',
    'parse_arguments', 'check_arguments', 'CookieAnalyzer',
    'print_cookies', 'print_error',
]
