from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class UnlockedAchievement:
    code: str
    name: str
    description: str
    icon: str = ''
    metadata: dict[str, Any] = field(default_factory=dict, compare=False)
