from __future__ import annotations

from typing import Any

from scavenger_hunt.achievements.interface import AchievementRule
from scavenger_hunt.catalog.catalog import ActivityCatalog
from scavenger_hunt.models.progress import ProgressState
from scavenger_hunt.utils.constants import (
    DOMAIN_EXPERT_ACTIVITIES,
    PHOTO_MASTER_ACTIVITIES,
)


class BaseCompletedCountRule(AchievementRule):
    '''Base rule for "complete N activities" milestones'''

    code: str = ''
    name: str = ''
    description: str = ''
    icon: str = ''
    required_count: int = 0  # to be overridden in subclasses

    def evaluate(
        self, state: ProgressState, catalog: ActivityCatalog
    ) -> tuple[bool, dict[str, Any] | None]:
        cnt = len(state.completed_activity_ids)
        return cnt >= self.required_count, {'completed': cnt}


class FirstActivity(BaseCompletedCountRule):
    code = 'first_activity'
    name = 'First Steps'
    description = 'Complete your first activity'
    icon = 'star.fill'
    required_count = 1


class PhotoMaster(BaseCompletedCountRule):
    code = 'photo_master'
    name = 'Photo Master'
    description = f'Complete {PHOTO_MASTER_ACTIVITIES} photo challenges'
    icon = 'camera.fill'
    required_count = PHOTO_MASTER_ACTIVITIES


class DomainExpert(BaseCompletedCountRule):
    code = 'domain_expert'
    name = 'Seattle Expert'
    description = f'Complete {DOMAIN_EXPERT_ACTIVITIES} activities'
    icon = 'building.2.fill'
    required_count = DOMAIN_EXPERT_ACTIVITIES


class Completionist(AchievementRule):
    code = 'completionist'
    name = 'Completionist'
    description = 'Complete every activity in the hunt'
    icon = 'trophy.fill'

    def evaluate(
        self, state: ProgressState, catalog: ActivityCatalog
    ) -> tuple[bool, dict[str, Any] | None]:
        # Ids outside the catalog do not count toward completion
        cnt = len(state.completed_activity_ids & catalog.ids())
        total = len(catalog)
        return total > 0 and cnt >= total, {'completed': cnt, 'total': total}
