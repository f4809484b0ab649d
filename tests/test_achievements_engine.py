from scavenger_hunt.achievements.engine import AchievementsEngine, engine
from scavenger_hunt.achievements.registry import AchievementRegistry
from scavenger_hunt.models.activity import Category
from scavenger_hunt.models.progress import ProgressState
from scavenger_hunt.services.progress_tracker import ProgressTracker
from tests.conftest import make_catalog


class _Rule:
    def __init__(self, code: str, earned: bool = True):
        self.code = code
        self.name = 'Rule'
        self.description = 'Desc'
        self.icon = 'star'
        self._earned = earned

    def evaluate(self, state, catalog):
        return self._earned, {'x': 1}


class _BrokenRule(_Rule):
    def evaluate(self, state, catalog):
        raise RuntimeError('rule exploded')


def test_engine_returns_earned_rules_only(catalog):
    rules = AchievementRegistry()
    rules.register(_Rule('r1', earned=True))  # type: ignore[arg-type]
    rules.register(_Rule('r2', earned=False))  # type: ignore[arg-type]

    unlocked = AchievementsEngine(rules).evaluate(ProgressState(), catalog)

    assert [a.code for a in unlocked] == ['r1']
    assert unlocked[0].metadata == {'x': 1}
    assert unlocked[0].icon == 'star'


def test_engine_skips_failing_rule(catalog):
    rules = AchievementRegistry()
    rules.register(_BrokenRule('broken'))  # type: ignore[arg-type]
    rules.register(_Rule('ok'))  # type: ignore[arg-type]

    unlocked = AchievementsEngine(rules).evaluate(ProgressState(), catalog)

    assert [a.code for a in unlocked] == ['ok']


def test_engine_uses_global_registry_by_default(clean_registry, catalog):
    clean_registry.register(_Rule('only'))  # type: ignore[arg-type]

    unlocked = AchievementsEngine().evaluate(ProgressState(), catalog)

    assert [a.code for a in unlocked] == ['only']


def test_newly_unlocked_reports_transition(catalog):
    before = ProgressState(completed_activity_ids={1}, total_points=490)
    after = ProgressState(completed_activity_ids={1, 2}, total_points=530)

    new = engine.newly_unlocked(before, after, catalog)

    assert [a.code for a in new] == ['point_collector']


def test_crossing_500_points_unlocks_point_collector(store, clock):
    catalog = make_catalog(
        (499, Category.FOOD), (1, Category.NATURE), (10, Category.SPOOKY)
    )
    tracker = ProgressTracker(catalog, store, clock=clock)

    tracker.complete_activity(1)
    assert tracker.state.total_points == 499
    assert not tracker.is_unlocked('point_collector')

    tracker.complete_activity(2)
    assert tracker.state.total_points == 500
    assert tracker.is_unlocked('point_collector')


def test_completing_whole_catalog_unlocks_everything(tracker, catalog):
    for activity in catalog:
        tracker.complete_activity(activity.id)

    codes = {a.code for a in tracker.unlocked_achievements()}
    assert codes == {r.code for r in engine.registry.all()}
    assert tracker.is_unlocked('completionist')
