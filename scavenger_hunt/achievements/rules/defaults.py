from __future__ import annotations

from scavenger_hunt.achievements.interface import AchievementRule
from scavenger_hunt.achievements.registry import registry
from scavenger_hunt.achievements.rules.diversity import CategoryExplorer
from scavenger_hunt.achievements.rules.milestones import (
    Completionist,
    DomainExpert,
    FirstActivity,
    PhotoMaster,
)
from scavenger_hunt.achievements.rules.points import PointCollector

# Listing order of the hunt's achievements
HUNT_ACHIEVEMENTS: tuple[AchievementRule, ...] = (
    FirstActivity(),
    CategoryExplorer(),
    PointCollector(),
    PhotoMaster(),
    DomainExpert(),
    Completionist(),
)

for _rule in HUNT_ACHIEVEMENTS:
    registry.register(_rule)
