from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional

from scavenger_hunt.models.achievement import UnlockedAchievement
from scavenger_hunt.models.activity import Activity
from scavenger_hunt.models.progress import ProgressState

EventType = Literal['activity_completed']


@dataclass(frozen=True)
class ActivityCompletedEvent:
    activity_id: int
    activity: Optional[Activity]  # None when the id is not in the catalog
    state: ProgressState
    occurred_at: datetime
    newly_unlocked: tuple[UnlockedAchievement, ...] = field(default_factory=tuple)

    @property
    def type(self) -> EventType:
        return 'activity_completed'
