"""Static reference catalogs and the demo seed for the subscription store."""

from __future__ import annotations

from datetime import date
from typing import List, Protocol, Sequence, Tuple, TypeVar

from .entities import Category, Frequency, Service, Subscription


class CatalogEntry(Protocol):
    id: int
    name: str


EntryT = TypeVar("EntryT", bound=CatalogEntry)


SERVICES: Tuple[Service, ...] = (
    Service(id=1, name="Netflix", icon="netflix_icon"),
    Service(id=2, name="Hulu", icon="hulu_icon"),
    Service(id=3, name="Spotify", icon="spotify_icon"),
    Service(id=4, name="PlayStation+", icon="play_station_icon"),
    Service(id=5, name="Paramount+", icon="paramount_icon"),
    Service(id=6, name="YouTube Music", icon="youtube_music_icon"),
)

CATEGORIES: Tuple[Category, ...] = (
    Category(id=1, name="Subscription", icon="subscription_icon"),
    Category(id=2, name="Utility", icon="utility_icon"),
    Category(id=3, name="Card Payment", icon="card_payment"),
    Category(id=4, name="Loan", icon="loan_icon"),
    Category(id=5, name="Rent", icon="rent_icon"),
)

FREQUENCIES: Tuple[Frequency, ...] = (
    Frequency(id=1, name="Weekly"),
    Frequency(id=2, name="Monthly"),
    Frequency(id=3, name="Annually"),
)


def filter_by_name(entries: Sequence[EntryT], text: str) -> List[EntryT]:
    """Case-insensitive substring match on ``name``; empty text keeps everything."""
    needle = (text or "").strip().casefold()
    if not needle:
        return list(entries)
    return [entry for entry in entries if needle in entry.name.casefold()]


def demo_subscriptions(today: date) -> List[Subscription]:
    """Build the four entries the store is seeded with at startup."""
    # (service, category, frequency, amount, active)
    rows = (
        (0, 0, 0, 100.0, True),
        (1, 2, 2, 399.0, True),
        (2, 3, 1, 499.0, False),
        (3, 4, 1, 59.0, True),
    )
    return [
        Subscription(
            service=SERVICES[svc],
            category=CATEGORIES[cat],
            frequency=FREQUENCIES[freq],
            amount=amount,
            start_date=today,
            is_active=active,
        )
        for svc, cat, freq, amount, active in rows
    ]


__all__ = [
    "CATEGORIES",
    "CatalogEntry",
    "FREQUENCIES",
    "SERVICES",
    "demo_subscriptions",
    "filter_by_name",
]
