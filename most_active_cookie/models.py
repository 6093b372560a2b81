"""Most Active Cookie - Data models"""

from dataclasses import dataclass
from typing import Optional

from .errors import ArgumentError


@dataclass(frozen=True)
class CookieEntry:
    """One cookie log row kept for the target date"""
    cookie: str
    timestamp: str


@dataclass(frozen=True)
class Arguments:
    """Validated command line arguments"""
    file_path: str
    date: str


@dataclass(frozen=True)
class ParseResult:
    """Outcome of argument parsing: either arguments or the error that stopped it"""
    arguments: Optional[Arguments] = None
    error: Optional[ArgumentError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
