from typing import Dict, List, Optional
import logging

from app.db.Models.models import URLEntry, URLStats

logger = logging.getLogger(__name__)


class URLRegistry:
    """In-memory mapping of short code to URL entry.

    Not thread-safe on its own; URLService serializes access to it.
    """

    def __init__(self):
        self._urls: Dict[str, URLEntry] = {}

    def __len__(self) -> int:
        return len(self._urls)

    def __contains__(self, short_code: str) -> bool:
        return short_code in self._urls

    def get(self, short_code: str) -> Optional[URLEntry]:
        return self._urls.get(short_code)

    def add(self, short_code: str, entry: URLEntry) -> URLEntry:
        if not short_code:
            raise ValueError("Short code must not be empty")
        if short_code in self._urls:
            raise KeyError(short_code)
        self._urls[short_code] = entry
        logger.debug(f"Registered {short_code} -> {entry.original_url[:50]}")
        return entry

    def increment_click(self, short_code: str) -> bool:
        entry = self._urls.get(short_code)
        if entry is None:
            return False
        entry.click_count += 1
        return True

    def snapshot(self, short_code: str) -> Optional[URLStats]:
        entry = self._urls.get(short_code)
        if entry is None:
            return None
        return _to_stats(short_code, entry)

    def snapshot_all(self) -> List[URLStats]:
        return [_to_stats(code, entry) for code, entry in self._urls.items()]


def _to_stats(short_code: str, entry: URLEntry) -> URLStats:
    return URLStats(
        original_url=entry.original_url,
        short_code=short_code,
        click_count=entry.click_count,
        created_at=entry.created_at,
    )
