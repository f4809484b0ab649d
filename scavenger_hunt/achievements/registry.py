from __future__ import annotations

from typing import Iterable, List, Optional

from scavenger_hunt.achievements.interface import AchievementRule


class AchievementRegistry:
    def __init__(self) -> None:
        self._rules: List[AchievementRule] = []

    def register(self, rule: AchievementRule) -> None:
        # First registration of a code wins
        if not any(r.code == rule.code for r in self._rules):
            self._rules.append(rule)

    def get(self, code: str) -> Optional[AchievementRule]:
        return next((r for r in self._rules if r.code == code), None)

    def all(self) -> Iterable[AchievementRule]:
        return list(self._rules)


registry = AchievementRegistry()
