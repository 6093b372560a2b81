"""Most Active Cookie - Core analysis engine"""

import logging
from collections import Counter
from itertools import islice
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from .models import CookieEntry
from .patterns import DATE_PREFIX_LENGTH, FIELD_SEPARATOR, HEADER_LINES

logger = logging.getLogger(__name__)


class CookieAnalyzer:
    """Filters a cookie log to one date and finds the most active cookies"""

    def __init__(self, separator: str = FIELD_SEPARATOR, date_length: int = DATE_PREFIX_LENGTH):
        self.separator = separator
        self.date_length = date_length
        self.stats: Counter = Counter()

    def parse_line(self, line: str, target_date: str) -> Optional[CookieEntry]:
        """Return the entry for ``line`` if it is a two-field row on ``target_date``.

        Anything else, malformed rows included, gives None.
        """
        parts = line.split(self.separator)
        if len(parts) != 2:
            return None

        cookie = parts[0].strip()
        timestamp = parts[1].strip()
        if timestamp[:self.date_length] != target_date:
            return None
        return CookieEntry(cookie=cookie, timestamp=timestamp)

    def iter_cookies_for_date(self, filepath: str, target_date: str) -> Iterator[CookieEntry]:
        """Stream matching entries from ``filepath`` in file order, skipping the header.

        ``self.stats`` is replaced once the whole file has been read.
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Cookie log not found: {filepath}")

        stats: Counter = Counter()
        with open(path, 'r', encoding='utf-8', errors='ignore') as f:
            for line in islice(f, HEADER_LINES, None):
                stats['lines'] += 1
                entry = self.parse_line(line, target_date)
                if entry is None:
                    stats['dropped'] += 1
                    continue
                stats['matched'] += 1
                yield entry

        self.stats = stats
        logger.debug(
            "%d of %d lines matched %s (%d dropped) in %s",
            stats['matched'], stats['lines'], target_date, stats['dropped'], filepath,
        )

    def read_cookies_for_date(self, filepath: str, target_date: str) -> List[CookieEntry]:
        return list(self.iter_cookies_for_date(filepath, target_date))

    @staticmethod
    def count_cookies(cookies: Iterable[str]) -> Dict[str, int]:
        return dict(Counter(cookies))

    def find_most_active_cookies(self, cookies: Iterable[str]) -> List[str]:
        """Return every cookie sharing the highest count. Order is not significant."""
        counts = self.count_cookies(cookies)
        if not counts:
            return []
        max_count = max(counts.values())
        return [cookie for cookie, count in counts.items() if count == max_count]

    def analyze_file(self, filepath: str, target_date: str) -> List[str]:
        entries = self.iter_cookies_for_date(filepath, target_date)
        return self.find_most_active_cookies(entry.cookie for entry in entries)
