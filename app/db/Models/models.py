from dataclasses import dataclass


@dataclass
class URLEntry:
    original_url: str
    # seconds since epoch, set once when the entry is created
    created_at: int
    click_count: int = 0


@dataclass(frozen=True)
class URLStats:
    """Point-in-time view of one registry entry."""
    original_url: str
    short_code: str
    click_count: int
    created_at: int
