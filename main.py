import argparse
import logging
import sys
from datetime import datetime
from typing import Callable, Optional

import pendulum

from scavenger_hunt.achievements.events import ActivityCompletedEvent
from scavenger_hunt.achievements.registry import registry
from scavenger_hunt.catalog.seattle import seattle_catalog
from scavenger_hunt.errors import ScavengerHuntError, UnknownActivityError
from scavenger_hunt.models.activity import Category, Difficulty
from scavenger_hunt.services.progress_tracker import ProgressTracker
from scavenger_hunt.storage.factory import store_from_env
from scavenger_hunt.storage.interface import KeyValueStore
from scavenger_hunt.utils.constants import TIMESTAMP_FORMAT
from scavenger_hunt.utils.env import load_env, progress_key, strict_mode
from scavenger_hunt.utils.logs import setup_logging

logger = logging.getLogger(__name__)


def _parse_at(value: str) -> datetime:
    '''Parse --at values like "2026-10-18" or "2026-10-18 09:30" in local time.'''
    parsed = pendulum.parse(value, strict=False, tz='local')
    if not isinstance(parsed, datetime):
        raise ValueError(f'"{value}" is not a date or date and time')
    return parsed


def _build_tracker(
    store: KeyValueStore,
    strict: bool,
    clock: Optional[Callable[[], datetime]] = None,
) -> ProgressTracker:
    kwargs = {'clock': clock} if clock else {}
    return ProgressTracker(
        seattle_catalog(), store, key=progress_key(), strict=strict, **kwargs
    )


def cmd_activities(args: argparse.Namespace, store: KeyValueStore) -> int:
    tracker = _build_tracker(store, strict=False)
    activities = list(tracker.catalog)
    if args.category:
        activities = tracker.catalog.by_category(Category(args.category))
    if args.difficulty:
        wanted = Difficulty(args.difficulty)
        activities = [a for a in activities if a.difficulty == wanted]
    for a in activities:
        mark = 'x' if tracker.is_completed(a.id) else ' '
        print(
            f'[{mark}] {a.id:>2}. {a.name} ({a.category.display_name}, '
            f'{a.difficulty.display_name}, {a.points} pts)'
        )
    return 0


def _print_unlocked(event: ActivityCompletedEvent) -> None:
    for a in event.newly_unlocked:
        print(f'🏆 Unlocked: {a.name} - {a.description}')


def cmd_complete(args: argparse.Namespace, store: KeyValueStore) -> int:
    clock = None
    if args.at:
        at = _parse_at(args.at)
        clock = lambda: at  # noqa: E731
    tracker = _build_tracker(store, strict=args.strict or strict_mode(), clock=clock)
    tracker.subscribe(_print_unlocked)
    already = tracker.is_completed(args.activity_id)
    try:
        state = tracker.complete_activity(args.activity_id)
    except UnknownActivityError as e:
        print(f'❌ {e}', file=sys.stderr)
        return 1
    if already:
        print(f'Activity {args.activity_id} was already completed.')
    print(
        f'{state.total_points} points, streak {state.current_streak} '
        f'(best {state.longest_streak}), {tracker.completion_percentage():.1f}% done'
    )
    return 0


def cmd_progress(args: argparse.Namespace, store: KeyValueStore) -> int:
    tracker = _build_tracker(store, strict=False)
    state = tracker.state
    done = state.completed_activity_ids & tracker.catalog.ids()
    print(f'Completed: {len(done)}/{len(tracker.catalog)}')
    print(f'Completion: {tracker.completion_percentage():.1f}%')
    print(f'Points: {state.total_points}')
    print(f'Streak: {state.current_streak} (longest {state.longest_streak})')
    if state.last_activity_at is not None:
        print(f'Last activity: {state.last_activity_at.strftime(TIMESTAMP_FORMAT)}')
    counts = tracker.completed_count_by_category()
    for category, points in tracker.points_by_category().items():
        total = len(tracker.catalog.by_category(category))
        print(
            f'  {category.display_name:<22} {counts[category]}/{total}  {points} pts'
        )
    return 0


def cmd_achievements(args: argparse.Namespace, store: KeyValueStore) -> int:
    tracker = _build_tracker(store, strict=False)
    unlocked = {a.code for a in tracker.unlocked_achievements()}
    for rule in registry.all():
        mark = '🏆' if rule.code in unlocked else '🔒'
        print(f'{mark} {rule.name}: {rule.description}')
    return 0


def cmd_nearby(args: argparse.Namespace, store: KeyValueStore) -> int:
    for a in seattle_catalog().nearby(args.latitude, args.longitude, args.radius):
        print(f'{a.id:>2}. {a.name} - {a.location}')
    return 0


def cmd_reset(args: argparse.Namespace, store: KeyValueStore) -> int:
    store.delete(progress_key())
    print('Progress cleared.')
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Seattle scavenger hunt progress')
    parser.add_argument('-v', '--verbose', action='store_true')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('activities', help='List activities')
    p.add_argument('--category', choices=[c.value for c in Category])
    p.add_argument('--difficulty', choices=[d.value for d in Difficulty])
    p.set_defaults(func=cmd_activities)

    p = sub.add_parser('complete', help='Mark an activity as completed')
    p.add_argument('activity_id', type=int)
    p.add_argument('--strict', action='store_true', help='Reject unknown ids')
    p.add_argument('--at', help='Completion time (default: now)')
    p.set_defaults(func=cmd_complete)

    p = sub.add_parser('progress', help='Show progress statistics')
    p.set_defaults(func=cmd_progress)

    p = sub.add_parser('achievements', help='Show achievements')
    p.set_defaults(func=cmd_achievements)

    p = sub.add_parser('nearby', help='Activities near a point')
    p.add_argument('latitude', type=float)
    p.add_argument('longitude', type=float)
    p.add_argument('--radius', type=float, default=1.0, help='Radius in km')
    p.set_defaults(func=cmd_nearby)

    p = sub.add_parser('reset', help='Delete saved progress')
    p.set_defaults(func=cmd_reset)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    load_env()
    try:
        store = store_from_env()
        return args.func(args, store)
    except (ScavengerHuntError, ValueError) as e:
        logger.error(f'{e}')
        return 1


if __name__ == '__main__':
    sys.exit(main())
