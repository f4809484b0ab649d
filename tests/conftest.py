from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from scavenger_hunt.catalog.catalog import ActivityCatalog
from scavenger_hunt.catalog.seattle import seattle_catalog
from scavenger_hunt.errors import StoreError
from scavenger_hunt.models.activity import Activity, Category
from scavenger_hunt.services.progress_tracker import ProgressTracker
from scavenger_hunt.storage.memory import MemoryStore


@dataclass
class FakeClock:
    now: datetime = field(
        default_factory=lambda: datetime(2026, 2, 5, 10, 0, tzinfo=timezone.utc)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: int = 0, hours: int = 0) -> None:
        self.now = self.now + timedelta(days=days, hours=hours)


@dataclass
class FailingStore:
    '''Store whose writes (and optionally reads) always fail.'''

    fail_reads: bool = False
    writes: int = 0

    def get(self, key: str) -> Optional[bytes]:
        if self.fail_reads:
            raise StoreError('read failed')
        return None

    def set(self, key: str, value: bytes) -> None:
        self.writes += 1
        raise StoreError('disk full')

    def delete(self, key: str) -> None:
        raise StoreError('delete failed')


class CountingStore(MemoryStore):
    def __init__(self) -> None:
        super().__init__()
        self.writes = 0

    def set(self, key: str, value: bytes) -> None:
        self.writes += 1
        super().set(key, value)


def make_catalog(*points_and_categories: tuple[int, Category]) -> ActivityCatalog:
    return ActivityCatalog(
        Activity(id=i, name=f'Activity {i}', category=category, points=points)
        for i, (points, category) in enumerate(points_and_categories, start=1)
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store() -> CountingStore:
    return CountingStore()


@pytest.fixture()
def catalog() -> ActivityCatalog:
    return seattle_catalog()


@pytest.fixture()
def tracker(catalog, store, clock) -> ProgressTracker:
    return ProgressTracker(catalog, store, clock=clock)


@pytest.fixture()
def clean_registry():
    from scavenger_hunt.achievements.registry import registry

    before = list(registry.all())
    registry._rules.clear()  # type: ignore[attr-defined]
    try:
        yield registry
    finally:
        registry._rules.clear()  # type: ignore[attr-defined]
        for r in before:
            registry.register(r)
