import random

import pytest

from scavenger_hunt.catalog.catalog import ActivityCatalog
from scavenger_hunt.models.activity import Activity, Category, Difficulty


def test_seattle_catalog_shape(catalog):
    ids = [a.id for a in catalog]
    assert ids == list(range(1, 25))
    assert sum(a.points for a in catalog) == 970
    assert {a.category for a in catalog} == set(Category)


def test_lookup_returns_none_for_unknown_id(catalog):
    assert catalog.get(1).name == 'Space Needle Summit'
    assert catalog.get(0) is None
    assert 24 in catalog
    assert 25 not in catalog
    assert catalog.ids() == frozenset(range(1, 25))


def test_duplicate_ids_are_rejected():
    a = Activity(id=1, name='A', category=Category.FOOD, points=10)
    b = Activity(id=1, name='B', category=Category.NATURE, points=20)
    with pytest.raises(ValueError):
        ActivityCatalog([a, b])


def test_activity_validates_id_and_points():
    with pytest.raises(ValueError):
        Activity(id=0, name='A', category=Category.FOOD, points=10)
    with pytest.raises(ValueError):
        Activity(id=1, name='A', category=Category.FOOD, points=-1)


def test_filters_by_category_and_difficulty(catalog):
    food = catalog.by_category(Category.FOOD)
    assert [a.id for a in food] == [14, 15, 16]

    hard = catalog.by_difficulty(Difficulty.HARD)
    assert [a.id for a in hard] == [9, 19]


def test_random_activity(catalog):
    picked = catalog.random_activity(random.Random(42))
    assert picked in list(catalog)
    assert ActivityCatalog([]).random_activity() is None


def test_nearby_filters_by_distance(catalog):
    # Standing at the Fremont Troll
    nearby = catalog.nearby(47.6509, -122.3473, radius_km=0.5)
    assert [a.id for a in nearby] == [7]

    wider = catalog.nearby(47.6509, -122.3473, radius_km=2.0)
    assert wider[0].id == 7
    assert 20 in {a.id for a in wider}  # Gas Works Park


def test_activity_coordinates():
    activity = Activity(
        id=1, name='A', category=Category.FOOD, points=1, coordinates='47.5,-122.25'
    )
    assert activity.latitude == 47.5
    assert activity.longitude == -122.25

    blank = Activity(id=2, name='B', category=Category.FOOD, points=1)
    assert blank.latitude is None and blank.longitude is None


def test_display_names():
    assert Category.ART_CULTURE.display_name == 'Art & Culture'
    assert Difficulty.MEDIUM.display_name == 'Medium'
