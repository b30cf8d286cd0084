"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Achievement(str, Enum):
    FIRST_100_POINTS = "First 100 Points"
    FIVE_GREEN_TRIPS = "5 Green Trips"
    ECO_WARRIOR = "Eco Warrior"


class GoalKind(str, Enum):
    POINTS = "points"
    CARBON = "carbon"
    TRIPS = "trips"
