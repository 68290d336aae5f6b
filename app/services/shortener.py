from dataclasses import dataclass, replace
from typing import Callable, List, Optional
import logging
import threading
import time

from app.core.exceptions import CodeSpaceExhausted, CustomCodeExists, InvalidCustomCode, InvalidUrl
from app.db.Models.models import URLEntry, URLStats
from app.db.repository import URLRegistry
from app.utils.encoding import encode_base62, hash_fallback_number, is_valid_custom_code, is_valid_url


logger = logging.getLogger(__name__)

DEFAULT_COUNTER_START = 1000
MAX_FALLBACK_ATTEMPTS = 16


@dataclass(frozen=True)
class ShortenResult:
    short_code: str
    short_url: str


class URLService:
    """The shortening engine: owns the registry and the code counter.

    Every public operation runs under a single lock, so the
    check-then-insert sequence of ``shorten`` and the click increment are
    atomic when the service is shared between worker threads.
    """

    def __init__(self, base_url: str, counter_start: int = DEFAULT_COUNTER_START,
                 clock: Callable[[], float] = time.time):
        self.base_url = base_url.rstrip("/")
        self._registry = URLRegistry()
        self._counter = counter_start
        self._clock = clock
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)

    @property
    def counter(self) -> int:
        return self._counter

    def build_short_url(self, short_code: str) -> str:
        return f"{self.base_url}/{short_code}"

    def shorten(self, url: str, custom_code: Optional[str] = None) -> ShortenResult:
        if not is_valid_url(url):
            logger.warning(f"Rejected URL without http(s) scheme: {url[:50]}")
            raise InvalidUrl()

        if custom_code is not None and not is_valid_custom_code(custom_code):
            logger.warning(f"Rejected custom code: '{custom_code[:50]}'")
            raise InvalidCustomCode()

        with self._lock:
            if custom_code is not None:
                if custom_code in self._registry:
                    logger.warning(f"Custom code collision: '{custom_code}'")
                    raise CustomCodeExists()
                short_code = custom_code
            else:
                short_code = self._generate_short_code(url)

            self._registry.add(short_code, URLEntry(original_url=url, created_at=int(self._clock())))

        logger.info(f"Shortened {url[:50]} to {short_code}")
        return ShortenResult(short_code=short_code, short_url=self.build_short_url(short_code))

    def _generate_short_code(self, url: str) -> str:
        # caller holds the lock
        code = encode_base62(self._counter)
        self._counter += 1
        if code not in self._registry:
            return code

        logger.info(f"Counter code {code} already taken, using hash-based fallback")
        for attempt in range(MAX_FALLBACK_ATTEMPTS):
            code = encode_base62(hash_fallback_number(url, self._counter))
            if code not in self._registry:
                return code
            logger.warning(f"Fallback code collision on attempt {attempt + 1}/{MAX_FALLBACK_ATTEMPTS}")
            self._counter += 1

        raise CodeSpaceExhausted(f"Failed to generate unique short code after {MAX_FALLBACK_ATTEMPTS} attempts")

    def lookup(self, code: str) -> Optional[URLEntry]:
        with self._lock:
            entry = self._registry.get(code)
            return replace(entry) if entry is not None else None

    def record_click(self, code: str) -> None:
        with self._lock:
            if self._registry.increment_click(code):
                logger.debug(f"Click recorded for {code}")

    def stats(self, code: str) -> Optional[URLStats]:
        with self._lock:
            return self._registry.snapshot(code)

    def list_all(self) -> List[URLStats]:
        """Snapshot of every entry. Callers must not rely on the order."""
        with self._lock:
            return self._registry.snapshot_all()
