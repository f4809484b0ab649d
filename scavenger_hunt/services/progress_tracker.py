from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Callable

from scavenger_hunt.achievements.engine import AchievementsEngine, engine
from scavenger_hunt.achievements.events import ActivityCompletedEvent
from scavenger_hunt.catalog.catalog import ActivityCatalog
from scavenger_hunt.errors import UnknownActivityError
from scavenger_hunt.models.achievement import UnlockedAchievement
from scavenger_hunt.models.activity import Activity, Category
from scavenger_hunt.models.progress import ProgressState
from scavenger_hunt.storage.interface import KeyValueStore
from scavenger_hunt.utils.constants import PROGRESS_KEY
from scavenger_hunt.utils.helper import days_between
from scavenger_hunt.utils.tracing import trace_span

logger = logging.getLogger(__name__)

Subscriber = Callable[[ActivityCompletedEvent], None]


def _local_now() -> datetime:
    return datetime.now().astimezone()


class ProgressTracker:
    '''Completion state for one player, persisted to a key-value store.

    The tracker is not thread-safe: callers must serialize calls to
    complete_activity. Derived queries never touch the store.
    '''

    def __init__(
        self,
        catalog: ActivityCatalog,
        store: KeyValueStore,
        key: str = PROGRESS_KEY,
        strict: bool = False,
        clock: Callable[[], datetime] = _local_now,
        achievements: AchievementsEngine = engine,
    ) -> None:
        self.catalog = catalog
        self.store = store
        self.key = key
        self.strict = strict
        self._clock = clock
        self._achievements = achievements
        self._subscribers: list[Subscriber] = []
        self._state = self.load()

    @property
    def state(self) -> ProgressState:
        '''A copy of the current state; mutating it has no effect.'''
        return self._state.copy()

    # --- mutation ---

    def complete_activity(self, activity_id: int) -> ProgressState:
        if activity_id in self._state.completed_activity_ids:
            logger.debug(f'Activity {activity_id} already completed')
            return self.state

        activity = self.catalog.get(activity_id)
        if activity is None:
            if self.strict:
                raise UnknownActivityError(activity_id)
            logger.warning(
                f'Activity {activity_id} is not in the catalog; '
                f'recording it without points'
            )

        with trace_span('progress.complete_activity', {'activity_id': activity_id}):
            before = self._state.copy()
            now = self._clock()
            if now.tzinfo is None:
                # Naive readings are local wall time; store them with an offset
                now = now.astimezone()
            state = self._state

            state.completed_activity_ids.add(activity_id)
            if activity is not None:
                state.total_points += activity.points
                state.categories_completed.add(activity.category)

            if state.last_activity_at is None:
                state.current_streak = 1
            else:
                gap = days_between(state.last_activity_at, now)
                if gap == 1:
                    state.current_streak += 1
                elif gap > 1:
                    state.current_streak = 1

            state.longest_streak = max(state.longest_streak, state.current_streak)
            state.last_activity_at = now
            if state.started_at is None:
                state.started_at = now

            self.save()

            unlocked = self._achievements.newly_unlocked(before, state, self.catalog)
            for achievement in unlocked:
                logger.info(f'Achievement unlocked: {achievement.name}')

        self._notify(
            ActivityCompletedEvent(
                activity_id=activity_id,
                activity=activity,
                state=self.state,
                occurred_at=now,
                newly_unlocked=tuple(unlocked),
            )
        )
        return self.state

    # --- derived queries ---

    def is_completed(self, activity_id: int) -> bool:
        return activity_id in self._state.completed_activity_ids

    def completion_percentage(self) -> float:
        total = len(self.catalog)
        if total == 0:
            return 0.0
        done = self._state.completed_activity_ids & self.catalog.ids()
        return 100 * len(done) / total

    def points_by_category(self) -> dict[Category, int]:
        points = {category: 0 for category in Category}
        for activity in self._completed_activities():
            points[activity.category] += activity.points
        return points

    def completed_count_by_category(self) -> dict[Category, int]:
        counts = {category: 0 for category in Category}
        for activity in self._completed_activities():
            counts[activity.category] += 1
        return counts

    def remaining_activities(self) -> list[Activity]:
        return [a for a in self.catalog if not self.is_completed(a.id)]

    def unlocked_achievements(self) -> list[UnlockedAchievement]:
        return self._achievements.evaluate(self._state, self.catalog)

    def is_unlocked(self, code: str) -> bool:
        return any(a.code == code for a in self.unlocked_achievements())

    def _completed_activities(self) -> list[Activity]:
        found = (self.catalog.get(i) for i in self._state.completed_activity_ids)
        return [a for a in found if a is not None]

    # --- notification ---

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        '''Register a callback for completions; returns an unsubscribe function.'''
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, event: ActivityCompletedEvent) -> None:
        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception:
                logger.exception(f'Progress subscriber {callback!r} failed')

    # --- persistence ---

    def save(self) -> None:
        '''Write the current state to the store. Failures are logged only.'''
        with trace_span('progress.save', {'key': self.key}):
            try:
                blob = json.dumps(self._state.to_dict()).encode('utf-8')
                self.store.set(self.key, blob)
            except Exception:
                logger.exception(f'Failed to save progress under "{self.key}"')

    def load(self) -> ProgressState:
        '''Read the saved state, or an empty one if it is missing or corrupt.'''
        with trace_span('progress.load', {'key': self.key}):
            try:
                blob = self.store.get(self.key)
            except Exception:
                logger.exception(f'Failed to read progress under "{self.key}"')
                return ProgressState()
            if blob is None:
                logger.info('No saved progress; starting fresh')
                return ProgressState()
            try:
                state = ProgressState.from_dict(json.loads(blob))
            except (TypeError, ValueError) as e:
                # JSONDecodeError and UnicodeDecodeError are ValueErrors
                logger.warning(f'Ignoring unreadable saved progress: {e}')
                return ProgressState()
            return self._reconcile(state)

    def _reconcile(self, state: ProgressState) -> ProgressState:
        '''Re-derive cached totals from the catalog.'''
        found = [self.catalog.get(i) for i in state.completed_activity_ids]
        known = [a for a in found if a is not None]
        total_points = sum(a.points for a in known)
        categories = {a.category for a in known}
        changed = (
            total_points != state.total_points
            or categories != state.categories_completed
        )
        if changed:
            logger.info(
                f'Saved totals out of date ({state.total_points} points); '
                f're-derived {total_points} points from the catalog'
            )
        state.total_points = total_points
        state.categories_completed = categories
        state.longest_streak = max(state.longest_streak, state.current_streak)
        return state
