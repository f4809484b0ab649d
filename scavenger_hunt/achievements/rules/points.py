from __future__ import annotations

from typing import Any

from scavenger_hunt.achievements.interface import AchievementRule
from scavenger_hunt.catalog.catalog import ActivityCatalog
from scavenger_hunt.models.progress import ProgressState
from scavenger_hunt.utils.constants import POINT_COLLECTOR_POINTS


class PointCollector(AchievementRule):
    code = 'point_collector'
    name = 'Point Collector'
    description = f'Earn {POINT_COLLECTOR_POINTS} points'
    icon = 'star.circle.fill'
    required_points = POINT_COLLECTOR_POINTS

    def evaluate(
        self, state: ProgressState, catalog: ActivityCatalog
    ) -> tuple[bool, dict[str, Any] | None]:
        return state.total_points >= self.required_points, {
            'total_points': state.total_points
        }
