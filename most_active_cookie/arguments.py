"""Most Active Cookie - Command line arguments"""

from typing import Sequence

from .errors import ArgumentError, MissingValueError, UnknownArgumentError, UsageError
from .models import Arguments, ParseResult
from .patterns import DATE_FLAG, EXPECTED_ARG_COUNT, FILE_FLAG


def parse_arguments(args: Sequence[str]) -> Arguments:
    """Read ``-f <file>`` and ``-d <date>`` from ``args`` in either order.

    Raises:
        UsageError: ``args`` does not hold exactly four tokens.
        UnknownArgumentError: a flag token is neither ``-f`` nor ``-d``.
        MissingValueError: the file path or the date is blank.
    """
    if len(args) != EXPECTED_ARG_COUNT:
        raise UsageError()

    file_path = ""
    date = ""
    for i in range(0, len(args), 2):
        flag, value = args[i], args[i + 1]
        if flag == FILE_FLAG:
            file_path = value
        elif flag == DATE_FLAG:
            date = value
        else:
            raise UnknownArgumentError(flag)

    if not file_path.strip() or not date.strip():
        raise MissingValueError()

    return Arguments(file_path=file_path, date=date)


def check_arguments(args: Sequence[str]) -> ParseResult:
    try:
        return ParseResult(arguments=parse_arguments(args))
    except ArgumentError as e:
        return ParseResult(error=e)
