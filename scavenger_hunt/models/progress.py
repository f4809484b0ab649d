from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

import pendulum

from scavenger_hunt.models.activity import Category
from scavenger_hunt.utils.constants import PROGRESS_SCHEMA_VERSION

logger = logging.getLogger(__name__)


@dataclass
class ProgressState:
    completed_activity_ids: set[int] = field(default_factory=set)
    total_points: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    categories_completed: set[Category] = field(default_factory=set)
    last_activity_at: Optional[datetime] = None
    started_at: Optional[datetime] = None

    def copy(self) -> 'ProgressState':
        return ProgressState(
            completed_activity_ids=set(self.completed_activity_ids),
            total_points=self.total_points,
            current_streak=self.current_streak,
            longest_streak=self.longest_streak,
            categories_completed=set(self.categories_completed),
            last_activity_at=self.last_activity_at,
            started_at=self.started_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'version': PROGRESS_SCHEMA_VERSION,
            'completed_activity_ids': sorted(self.completed_activity_ids),
            'total_points': self.total_points,
            'current_streak': self.current_streak,
            'longest_streak': self.longest_streak,
            'categories_completed': sorted(c.value for c in self.categories_completed),
            'last_activity_at': _format_ts(self.last_activity_at),
            'started_at': _format_ts(self.started_at),
        }

    @classmethod
    def from_dict(cls, data: Any) -> 'ProgressState':
        '''Build a state from a decoded document.

        Unknown keys are ignored and missing keys take their defaults so
        documents written by older or newer versions still load. Raises
        ValueError when a known key holds the wrong type.
        '''
        if not isinstance(data, dict):
            raise ValueError(f'Expected a JSON object, got {type(data).__name__}')

        version = data.get('version', PROGRESS_SCHEMA_VERSION)
        if version != PROGRESS_SCHEMA_VERSION:
            logger.info(f'Reading progress written with schema version {version}')

        categories: set[Category] = set()
        for raw in _list_field(data, 'categories_completed'):
            try:
                categories.add(Category(raw))
            except ValueError:
                logger.warning(f'Dropping unknown category "{raw}" from progress')

        return cls(
            completed_activity_ids={
                _int_value(v, 'completed_activity_ids')
                for v in _list_field(data, 'completed_activity_ids')
            },
            total_points=_int_field(data, 'total_points'),
            current_streak=_int_field(data, 'current_streak'),
            longest_streak=_int_field(data, 'longest_streak'),
            categories_completed=categories,
            last_activity_at=_parse_ts(data.get('last_activity_at')),
            started_at=_parse_ts(data.get('started_at')),
        )


def _list_field(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f'Field "{key}" must be a list')
    return value


def _int_field(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    return _int_value(value, key)


def _int_value(value: Any, key: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f'Field "{key}" must hold integers, got {value!r}')
    if value < 0:
        raise ValueError(f'Field "{key}" must not be negative, got {value}')
    return value


def _format_ts(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_ts(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f'Timestamp must be a string, got {value!r}')
    try:
        parsed = pendulum.parse(value, strict=False)
    except Exception as e:
        raise ValueError(f'Could not parse timestamp "{value}": {e}') from e
    if not isinstance(parsed, datetime):
        raise ValueError(f'Timestamp "{value}" is not a date and time')
    return parsed
