"""Tests for LeaderboardPolicy."""

import pytest

from app.domain.entities.profile import Profile
from app.domain.policies.leaderboard import rank_profiles


def _p(user_id: str, points: int, carbon: float = 0.0) -> Profile:
    return Profile(
        id=None, user_id=user_id, email=f"{user_id}@example.com",
        points=points, total_carbon_saved=carbon,
    )


def test_ranked_by_points_desc():
    entries = rank_profiles([_p("a", 10), _p("b", 30), _p("c", 20)])
    assert [e.user_id for e in entries] == ["b", "c", "a"]
    assert [e.position for e in entries] == [1, 2, 3]


def test_ties_broken_by_carbon_then_email():
    entries = rank_profiles([_p("z", 50, 1.0), _p("y", 50, 2.0), _p("x", 50, 1.0)])
    assert [e.user_id for e in entries] == ["y", "x", "z"]


def test_limit_applied():
    profiles = [_p(f"u{i}", i) for i in range(15)]
    entries = rank_profiles(profiles, limit=10)
    assert len(entries) == 10
    assert entries[0].user_id == "u14"
    assert entries[-1].position == 10


def test_current_user_marked():
    entries = rank_profiles([_p("a", 10), _p("b", 30)], current_user_id="a")
    flags = {e.user_id: e.is_current_user for e in entries}
    assert flags == {"a": True, "b": False}


def test_empty_leaderboard():
    assert rank_profiles([]) == []


def test_invalid_limit():
    with pytest.raises(ValueError):
        rank_profiles([_p("a", 1)], limit=0)
