import pytest

import scavenger_hunt.achievements.rules.diversity as diversity_module
import scavenger_hunt.achievements.rules.milestones as milestones_module
import scavenger_hunt.achievements.rules.points as points_module
from scavenger_hunt.models.activity import Category
from scavenger_hunt.models.progress import ProgressState
from tests.conftest import make_catalog


def _state(completed: int = 0, points: int = 0, categories: int = 0):
    return ProgressState(
        completed_activity_ids=set(range(1, completed + 1)),
        total_points=points,
        categories_completed=set(list(Category)[:categories]),
    )


@pytest.mark.parametrize(
    'rule, count, expected',
    [
        (milestones_module.FirstActivity(), 0, False),
        (milestones_module.FirstActivity(), 1, True),
        (milestones_module.PhotoMaster(), 9, False),
        (milestones_module.PhotoMaster(), 10, True),
        (milestones_module.DomainExpert(), 14, False),
        (milestones_module.DomainExpert(), 15, True),
    ],
)
def test_completed_count_milestones(catalog, rule, count, expected):
    ok, meta = rule.evaluate(_state(completed=count), catalog)
    assert ok is expected
    assert meta == {'completed': count}


def test_category_explorer_needs_five_categories(catalog):
    rule = diversity_module.CategoryExplorer()
    assert rule.evaluate(_state(categories=4), catalog)[0] is False
    ok, meta = rule.evaluate(_state(categories=5), catalog)
    assert ok is True
    assert meta == {'distinct_categories': 5}


def test_point_collector_threshold(catalog):
    rule = points_module.PointCollector()
    assert rule.evaluate(_state(points=499), catalog)[0] is False
    assert rule.evaluate(_state(points=500), catalog)[0] is True


def test_completionist_uses_catalog_size(catalog):
    rule = milestones_module.Completionist()
    assert rule.evaluate(_state(completed=23), catalog)[0] is False
    ok, meta = rule.evaluate(_state(completed=24), catalog)
    assert ok is True
    assert meta == {'completed': 24, 'total': 24}


def test_completionist_never_unlocks_for_empty_catalog():
    ok, _ = milestones_module.Completionist().evaluate(_state(), make_catalog())
    assert ok is False


def test_rules_satisfy_protocol():
    from scavenger_hunt.achievements.interface import AchievementRule

    for rule in (
        milestones_module.FirstActivity(),
        milestones_module.Completionist(),
        diversity_module.CategoryExplorer(),
        points_module.PointCollector(),
    ):
        assert isinstance(rule, AchievementRule)


def test_completionist_ignores_ids_outside_catalog(catalog):
    state = _state(completed=23)
    state.completed_activity_ids.add(999)

    ok, meta = milestones_module.Completionist().evaluate(state, catalog)
    assert ok is False
    assert meta == {'completed': 23, 'total': 24}
