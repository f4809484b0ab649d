from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from scavenger_hunt.catalog.catalog import ActivityCatalog
from scavenger_hunt.models.progress import ProgressState


@runtime_checkable
class AchievementRule(Protocol):
    code: str
    name: str
    description: str
    icon: str

    def evaluate(
        self, state: ProgressState, catalog: ActivityCatalog
    ) -> tuple[bool, dict[str, Any] | None]:
        '''
        Return (earned, metadata). Rules are pure: they read the state and
        catalog and never mutate either.
        '''
        pass
