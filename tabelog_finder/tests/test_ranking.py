from __future__ import annotations

import random

from tabelog_finder.search.models import Restaurant
from tabelog_finder.search.ranking import select_tier, sort_by_rating


def _restaurant(rating: float, name: str | None = None) -> Restaurant:
    name = name or f"Restaurant {rating}"
    return Restaurant(
        name=name,
        category="Izakaya",
        rating=rating,
        source_url=f"https://tabelog.com/en/tokyo/{name.replace(' ', '-')}/",
        address="Chiyoda-ku, Tokyo",
        map_url="https://maps.google.com/?q=Tokyo",
        dish_image_url="",
    )


def _ratings(restaurants):
    return [r.rating for r in restaurants]


def test_only_top_tier_when_it_exists():
    result = select_tier([_restaurant(4.2), _restaurant(3.9), _restaurant(3.4)])
    assert _ratings(result) == [4.2]


def test_relaxes_to_three_point_five_tier():
    result = select_tier([_restaurant(3.4), _restaurant(3.6)])
    assert _ratings(result) == [3.6]


def test_three_point_eight_tier():
    result = select_tier([_restaurant(3.5), _restaurant(3.85), _restaurant(3.8)])
    assert _ratings(result) == [3.85, 3.8]


def test_lowest_tier_is_kept_sorted():
    result = select_tier([_restaurant(3.3), _restaurant(3.45), _restaurant(3.1)])
    assert _ratings(result) == [3.45, 3.3]


def test_all_below_floor_is_empty():
    assert select_tier([_restaurant(3.2), _restaurant(2.9)]) == []


def test_empty_input():
    assert select_tier([]) == []


def test_sort_is_stable_for_ties():
    first, second = _restaurant(4.1, "First"), _restaurant(4.1, "Second")
    assert sort_by_rating([first, second]) == [first, second]


def test_custom_tiers():
    result = select_tier([_restaurant(4.6), _restaurant(4.4)], tiers=(4.5, 4.0))
    assert _ratings(result) == [4.6]


def test_never_empty_when_something_clears_the_floor():
    rng = random.Random(7)
    for _ in range(200):
        ratings = [round(rng.uniform(2.5, 4.8), 2) for _ in range(rng.randint(1, 12))]
        result = select_tier([_restaurant(r) for r in ratings])
        if any(r >= 3.3 for r in ratings):
            assert result
        else:
            assert result == []


def test_top_tier_is_exact_and_sorted():
    rng = random.Random(11)
    for _ in range(200):
        ratings = [round(rng.uniform(3.0, 4.8), 2) for _ in range(rng.randint(1, 12))]
        result = _ratings(select_tier([_restaurant(r) for r in ratings]))
        if any(r >= 4.0 for r in ratings):
            assert result == sorted((r for r in ratings if r >= 4.0), reverse=True)
