"""Most Active Cookie - Result output"""

from typing import Iterable, Optional, TextIO

from rich.console import Console

stderr_console = Console(stderr=True, soft_wrap=True, emoji=False, highlight=False)


def print_cookies(cookies: Iterable[str], file: Optional[TextIO] = None):
    # Identifiers go out unchanged, one per line
    for cookie in cookies:
        print(cookie, file=file)


def print_error(message: str, console: Optional[Console] = None):
    console = console or stderr_console
    console.print(message, style="red", markup=False)
