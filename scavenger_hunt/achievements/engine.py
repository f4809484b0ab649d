from __future__ import annotations

import logging

# Registers the hunt achievements in listing order
import scavenger_hunt.achievements.rules.defaults  # noqa: F401
from scavenger_hunt.achievements.registry import AchievementRegistry, registry
from scavenger_hunt.catalog.catalog import ActivityCatalog
from scavenger_hunt.models.achievement import UnlockedAchievement
from scavenger_hunt.models.progress import ProgressState
from scavenger_hunt.utils.tracing import trace_span

logger = logging.getLogger(__name__)


class AchievementsEngine:
    def __init__(self, rules: AchievementRegistry | None = None) -> None:
        self._registry = rules

    @property
    def registry(self) -> AchievementRegistry:
        return self._registry if self._registry is not None else registry

    def evaluate(
        self, state: ProgressState, catalog: ActivityCatalog
    ) -> list[UnlockedAchievement]:
        '''Every achievement the state currently satisfies, in registry order.'''
        with trace_span(
            'achievements.evaluate',
            {'completed': len(state.completed_activity_ids)},
        ) as span:
            unlocked: list[UnlockedAchievement] = []
            for rule in self.registry.all():
                try:
                    earned, metadata = rule.evaluate(state, catalog)
                except Exception:
                    # A broken rule must not break completion
                    logger.exception(f'Achievement rule {rule.code} failed')
                    continue
                if not earned:
                    continue
                unlocked.append(
                    UnlockedAchievement(
                        code=rule.code,
                        name=rule.name,
                        description=rule.description,
                        icon=getattr(rule, 'icon', ''),
                        metadata=metadata or {},
                    )
                )
            span.metadata['unlocked'] = len(unlocked)
            return unlocked

    def newly_unlocked(
        self,
        before: ProgressState,
        after: ProgressState,
        catalog: ActivityCatalog,
    ) -> list[UnlockedAchievement]:
        '''Achievements satisfied by ``after`` but not by ``before``.'''
        already = {a.code for a in self.evaluate(before, catalog)}
        return [a for a in self.evaluate(after, catalog) if a.code not in already]


engine = AchievementsEngine()
