from __future__ import annotations

import random
from typing import Iterable, Iterator, Optional

from scavenger_hunt.models.activity import Activity, Category, Difficulty
from scavenger_hunt.utils.helper import haversine_km


class ActivityCatalog:
    '''Immutable, ordered collection of activities keyed by id.'''

    def __init__(self, activities: Iterable[Activity]) -> None:
        ordered = tuple(activities)
        by_id: dict[int, Activity] = {}
        for activity in ordered:
            if activity.id in by_id:
                raise ValueError(f'Duplicate activity id {activity.id} in catalog')
            by_id[activity.id] = activity
        self._activities = ordered
        self._by_id = by_id

    def __len__(self) -> int:
        return len(self._activities)

    def __iter__(self) -> Iterator[Activity]:
        return iter(self._activities)

    def __contains__(self, activity_id: object) -> bool:
        return activity_id in self._by_id

    def get(self, activity_id: int) -> Optional[Activity]:
        return self._by_id.get(activity_id)

    def ids(self) -> frozenset[int]:
        return frozenset(self._by_id)

    def by_category(self, category: Category) -> list[Activity]:
        return [a for a in self._activities if a.category == category]

    def by_difficulty(self, difficulty: Difficulty) -> list[Activity]:
        return [a for a in self._activities if a.difficulty == difficulty]

    def random_activity(
        self, rng: Optional[random.Random] = None
    ) -> Optional[Activity]:
        if not self._activities:
            return None
        return (rng or random).choice(self._activities)

    def nearby(
        self, latitude: float, longitude: float, radius_km: float = 1.0
    ) -> list[Activity]:
        '''Activities within ``radius_km`` of a point, closest first.

        Activities without parseable coordinates are never returned.
        '''
        hits: list[tuple[float, Activity]] = []
        for activity in self._activities:
            lat, lon = activity.latitude, activity.longitude
            if lat is None or lon is None:
                continue
            distance = haversine_km(latitude, longitude, lat, lon)
            if distance <= radius_km:
                hits.append((distance, activity))
        hits.sort(key=lambda pair: pair[0])
        return [activity for _, activity in hits]
