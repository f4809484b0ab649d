from __future__ import annotations

from typing import Any

from scavenger_hunt.achievements.interface import AchievementRule
from scavenger_hunt.catalog.catalog import ActivityCatalog
from scavenger_hunt.models.progress import ProgressState
from scavenger_hunt.utils.constants import CATEGORY_EXPLORER_CATEGORIES


class CategoryExplorer(AchievementRule):
    code = 'category_explorer'
    name = 'Category Explorer'
    description = (
        f'Complete activities in {CATEGORY_EXPLORER_CATEGORIES} different categories'
    )
    icon = 'map.fill'
    required_categories = CATEGORY_EXPLORER_CATEGORIES

    def evaluate(
        self, state: ProgressState, catalog: ActivityCatalog
    ) -> tuple[bool, dict[str, Any] | None]:
        cnt = len(state.categories_completed)
        return cnt >= self.required_categories, {'distinct_categories': cnt}
