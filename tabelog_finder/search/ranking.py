from __future__ import annotations

from collections.abc import Iterable, Sequence

from .config import DEFAULT_SEARCH_CONFIG
from .models import Restaurant


def sort_by_rating(restaurants: Iterable[Restaurant]) -> list[Restaurant]:
    """Highest rating first; ties keep the order the service returned."""
    return sorted(restaurants, key=lambda r: r.rating, reverse=True)


def select_tier(
    restaurants: Iterable[Restaurant],
    tiers: Sequence[float] = DEFAULT_SEARCH_CONFIG.rating_tiers,
) -> list[Restaurant]:
    """
    Keep only the best non-empty rating tier.

    Candidates below the lowest floor are dropped. Of the rest, the highest
    floor that still leaves at least one restaurant wins, so excellent
    results are never mixed with merely adequate ones, yet any candidate
    above the lowest floor guarantees a non-empty answer.
    """
    floors = sorted(tiers, reverse=True)
    if not floors:
        return sort_by_rating(restaurants)

    ranked = [r for r in sort_by_rating(restaurants) if r.rating >= floors[-1]]
    for floor in floors:
        tier = [r for r in ranked if r.rating >= floor]
        if tier:
            return tier
    return []
