"""Most Active Cookie - Argument errors"""

from .patterns import MISSING_VALUE_MESSAGE, UNKNOWN_ARGUMENT_MESSAGE, USAGE_MESSAGE


class ArgumentError(ValueError):
    """Base class for command line argument problems"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(ArgumentError):
    """Wrong number of argument tokens"""

    def __init__(self):
        super().__init__(USAGE_MESSAGE)


class UnknownArgumentError(ArgumentError):
    """A flag other than -f or -d"""

    def __init__(self, token: str):
        super().__init__(UNKNOWN_ARGUMENT_MESSAGE.format(token=token))
        self.token = token


class MissingValueError(ArgumentError):
    """File path or date left blank"""

    def __init__(self):
        super().__init__(MISSING_VALUE_MESSAGE)
