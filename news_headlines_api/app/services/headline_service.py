"""
Service layer for news headlines.

``HeadlineService`` owns the in‑memory, insertion‑ordered collection
of headlines.  The API layer holds a single instance on
``app.state`` and reaches it only through the methods below.  FastAPI
runs synchronous endpoints in a thread pool, so every method that
touches the collection does so while holding the service lock.

Identifiers are derived from the creation time in milliseconds.  The
service remembers the last identifier it issued and never hands out a
smaller one, so two creates in the same millisecond still get distinct
ids and the id of a deleted headline is never reissued.
"""

from __future__ import annotations

import logging
import random
import threading
import time
from typing import Any, Callable, Dict, Iterable, List, Optional

from news_headlines_api.app.schemas.headline import Headline, HeadlineCreate, HeadlineUpdate
from news_headlines_api.app.services.errors import HeadlineNotFoundError, InvalidHeadlineError

logger = logging.getLogger(__name__)

DEFAULT_URL = "#"

SAMPLE_HEADLINES: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "New Technology Breakthrough Promises Faster Internet Speeds",
        "imageUrl": "https://images.unsplash.com/photo-1518770660439-4636190af475?ixlib=rb-1.2.1&auto=format&fit=crop&w=1350&q=80",
        "url": "https://example.com/news/1",
    },
    {
        "id": "2",
        "title": "Global Climate Summit Reaches Historic Agreement",
        "imageUrl": "https://images.unsplash.com/photo-1530893609608-32a9af3aa95c?ixlib=rb-1.2.1&auto=format&fit=crop&w=1350&q=80",
        "url": "https://example.com/news/2",
    },
    {
        "id": "3",
        "title": "MARINA grants special permits to ease San Juanico bridge disruption",
        "imageUrl": "https://files01.pna.gov.ph/ograph/2025/05/20/tacloban---ormoc-roro.jpg",
        "url": "https://news.google.com/read/CBMiUEFVX3lxTFBfY0JiOFQ3Q1ZxY0hIbnZubml0a1J0ZmxHWHN2UTB3RzlGOFhMUUVnT2U4dG9ja01Ia3JpdmtOdmx5eUNxbjZjVEU5dXlvX080?hl=en-PH&gl=PH&ceid=PH%3Aen",
    },
    {
        "id": "4",
        "title": "PBBM to Cabinet secretaries: Submit courtesy resignations",
        "imageUrl": "https://files01.pna.gov.ph/category-list/2025/05/08/img1671.jpeg",
        "url": "https://news.google.com/read/CBMiUEFVX3lxTE5HajV6SHhZdC1WckQxWW5OZzA2YmkxZjJMbUNuMlYxSXJkb2hfOHprNjUtSjhrTDluX2NuaEt1RUVZTy1FSzJlazhkTW8wNmFG?hl=en-PH&gl=PH&ceid=PH%3Aen",
    },
    {
        "id": "5",
        "title": "Justin Bieber's remarks on Hailey Bieber's Vogue cover sparks controversy",
        "imageUrl": "https://www.geo.tv/assets/uploads/updates/2025-05-21/l_605439_053336_updates.jpg",
        "url": "https://news.google.com/read/CBMixAFBVV95cUxNX1NfTlNxT0lBV3NzNW1qQ0F5TC02NmJwMkZGMm9pX29RcVRNcHRpU2RoVll6T04xWUxnQmtiSEpXejAxblRpNXcxVEZkUjc2aHktVHJxV0dIWTNFMFk4WlNvaVlYcmNXZFFxY21aYzh4M1JST1QxZ01oUElpOF9rRnA3NUdnVkdwcEtVR3pMWmFOdlFqU1NwX1hsN21OVFRDT25yby1JVTNWcGhINEpUbHBCZkc4T2kxM1RMal9kNzNKUHB6?hl=en-PH&gl=PH&ceid=PH%3Aen",
    },
    {
        # No imageUrl: clients fall back to their default image.
        "id": "6",
        "title": "Tech Giant Announces Revolutionary New Product Line",
        "url": "https://example.com/news/6",
    },
]

NOT_FOUND_MESSAGE = "Headline not found"


def _now_ms() -> int:
    return int(time.time() * 1000)


class HeadlineService:
    """In‑memory store for news headlines."""

    def __init__(
        self,
        headlines: Optional[Iterable[Dict[str, Any]]] = None,
        clock: Callable[[], int] = _now_ms,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._headlines: List[Headline] = []
        self._lock = threading.Lock()
        self._clock = clock
        self._rng = rng or random.Random()
        self._last_id = 0
        if headlines:
            self.seed(headlines)

    def __len__(self) -> int:
        with self._lock:
            return len(self._headlines)

    def seed(self, records: Iterable[Dict[str, Any]]) -> None:
        """Append headlines that already carry an ``id``.

        A record without ``url`` gets ``#``, as on create.

        Raises ``ValueError`` if a record reuses an id already in the
        store.
        """
        with self._lock:
            for record in records:
                headline = Headline.model_validate({"url": DEFAULT_URL, **record})
                if self._find_index(headline.id) is not None:
                    raise ValueError(f"Duplicate headline id {headline.id!r}")
                self._headlines.append(headline)
        logger.debug("Seeded store, %d headlines", len(self._headlines))

    def list_headlines(self) -> List[Headline]:
        """Return all headlines in insertion order."""
        with self._lock:
            return list(self._headlines)

    def get_random_headline(self) -> Headline:
        """Return a headline chosen uniformly at random."""
        with self._lock:
            if not self._headlines:
                raise HeadlineNotFoundError("No headlines available")
            return self._rng.choice(self._headlines)

    def get_headline(self, headline_id: str) -> Headline:
        """Return the headline whose id matches ``headline_id`` exactly."""
        with self._lock:
            index = self._find_index(headline_id)
            if index is None:
                raise HeadlineNotFoundError(NOT_FOUND_MESSAGE)
            return self._headlines[index]

    def create_headline(self, data: HeadlineCreate) -> Headline:
        """Create a headline, append it and return it.

        ``imageUrl`` is stored only when the request carried it, so a
        headline created without one serialises without the key.
        """
        if not data.title:
            raise InvalidHeadlineError("Title is required")
        values: Dict[str, Any] = {"title": data.title, "url": data.url or DEFAULT_URL}
        if "image_url" in data.model_fields_set:
            values["image_url"] = data.image_url
        with self._lock:
            values["id"] = self._next_id()
            headline = Headline(**values)
            self._headlines.append(headline)
        logger.info("Created headline %s", headline.id)
        return headline

    def update_headline(self, headline_id: str, data: HeadlineUpdate) -> Headline:
        """Update an existing headline and return the new state.

        ``title`` and ``url`` are replaced only by non‑empty values.
        ``imageUrl`` is replaced whenever the request carries it, which
        lets callers clear the image with ``null`` or ``""``.
        """
        with self._lock:
            index = self._find_index(headline_id)
            if index is None:
                raise HeadlineNotFoundError(NOT_FOUND_MESSAGE)
            values = self._headlines[index].model_dump(exclude_unset=True)
            if data.title:
                values["title"] = data.title
            if data.url:
                values["url"] = data.url
            if "image_url" in data.model_fields_set:
                values["image_url"] = data.image_url
            headline = Headline(**values)
            self._headlines[index] = headline
        logger.info("Updated headline %s", headline_id)
        return headline

    def delete_headline(self, headline_id: str) -> Headline:
        """Remove a headline and return it as it was before removal."""
        with self._lock:
            index = self._find_index(headline_id)
            if index is None:
                raise HeadlineNotFoundError(NOT_FOUND_MESSAGE)
            headline = self._headlines.pop(index)
        logger.info("Deleted headline %s", headline_id)
        return headline

    def _find_index(self, headline_id: str) -> Optional[int]:
        for index, headline in enumerate(self._headlines):
            if headline.id == headline_id:
                return index
        return None

    def _next_id(self) -> str:
        # Caller holds the lock.
        candidate = max(self._clock(), self._last_id + 1)
        while self._find_index(str(candidate)) is not None:
            candidate += 1
        self._last_id = candidate
        return str(candidate)
