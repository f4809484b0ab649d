from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    ICONIC_LANDMARKS = 'iconic_landmarks'
    ART_CULTURE = 'art_culture'
    NEIGHBORHOODS = 'neighborhoods'
    HISTORICAL = 'historical'
    NATURE = 'nature'
    FOOD = 'food'
    SPOOKY = 'spooky'
    OUTDOOR = 'outdoor'
    HIDDEN_GEMS = 'hidden_gems'
    WATERFRONT = 'waterfront'

    @property
    def display_name(self) -> str:
        return _CATEGORY_NAMES[self]


_CATEGORY_NAMES = {
    Category.ICONIC_LANDMARKS: 'Iconic Landmarks',
    Category.ART_CULTURE: 'Art & Culture',
    Category.NEIGHBORHOODS: 'Unique Neighborhoods',
    Category.HISTORICAL: 'Historical Sites',
    Category.NATURE: 'Natural Attractions',
    Category.FOOD: 'Culinary Delights',
    Category.SPOOKY: 'Spooky Spots',
    Category.OUTDOOR: 'Outdoor Adventures',
    Category.HIDDEN_GEMS: 'Hidden Gems',
    Category.WATERFRONT: 'Waterfront Wonders',
}


class Difficulty(str, Enum):
    EASY = 'easy'
    MEDIUM = 'medium'
    HARD = 'hard'

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Activity:
    id: int
    name: str
    category: Category
    points: int
    difficulty: Difficulty = Difficulty.EASY
    description: str = ''
    location: str = ''
    coordinates: str = ''  # "lat,lon"
    challenge: str = ''
    time_estimate: str = ''
    tips: tuple[str, ...] = field(default_factory=tuple)
    photo_challenge: str = ''

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise ValueError(f'Activity id must be positive, got {self.id}')
        if self.points < 0:
            raise ValueError(f'Activity {self.id} has negative points')

    @property
    def latitude(self) -> float | None:
        coords = self._parse_coordinates()
        return coords[0] if coords else None

    @property
    def longitude(self) -> float | None:
        coords = self._parse_coordinates()
        return coords[1] if coords else None

    def _parse_coordinates(self) -> tuple[float, float] | None:
        parts = self.coordinates.split(',')
        if len(parts) != 2:
            return None
        try:
            return float(parts[0]), float(parts[1])
        except ValueError:
            return None
