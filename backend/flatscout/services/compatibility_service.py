"""Flatmate compatibility scoring: encode profiles, measure distance, rank candidates.

Profiles are plain mappings in the stored record shape (snake_case keys,
``habits`` as a nested mapping). Each profile becomes a 7-number feature
vector; compatibility is derived from the Euclidean distance between two
vectors:

    compatibility = round(max(0, 100 - distance * 20))

Budget is encoded as its raw amount while every other feature lies in 0-2,
so budget differences dominate the distance: two profiles whose budgets
differ by 5 or more always score 0. Normalizing budget would change who
gets matched with whom and is intentionally not done here.

Historically this was called "k-means matching"; no clustering happens.
"""

import math
from collections.abc import Iterable, Mapping, Sequence

FEATURE_COUNT = 7
DISTANCE_PENALTY = 20  # score points lost per unit of distance
MAX_SCORE = 100


def _gender_code(value) -> int:
    if value == "Male":
        return 0
    return 1


def _preferred_gender_code(value) -> int:
    if value == "Male":
        return 0
    if value == "Female":
        return 1
    return 2  # Any, or anything unrecognized


def _budget_amount(value) -> float:
    """Numeric budget, 0 when the value cannot be read as a number."""
    if value is None or value == "":
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(amount):
        return 0.0
    return amount


def _yes_code(value) -> int:
    return 1 if value == "Yes" else 0


def _sleep_time_code(value) -> int:
    return 1 if value == "Late" else 0


def _cleanliness_code(value) -> int:
    if value == "High":
        return 2
    if value == "Medium":
        return 1
    return 0  # Low, or anything unrecognized


def encode_profile(profile: Mapping) -> list[float]:
    """Encode a flatmate profile as its ordered feature vector.

    Order: gender, preferred_gender, budget, smoking, pets, sleep_time,
    cleanliness. Unrecognized categorical values take the default code.

    Raises ValueError when the profile has no ``habits`` group.
    """
    habits = profile.get("habits")
    if not isinstance(habits, Mapping):
        raise ValueError("Flatmate profile has no habits group to encode")

    return [
        _gender_code(profile.get("gender")),
        _preferred_gender_code(profile.get("preferred_gender")),
        _budget_amount(profile.get("budget")),
        _yes_code(habits.get("smoking")),
        _yes_code(habits.get("pets")),
        _sleep_time_code(habits.get("sleep_time")),
        _cleanliness_code(habits.get("cleanliness")),
    ]


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Straight-line distance between two feature vectors of equal length."""
    if len(a) != len(b):
        raise ValueError(f"Feature vectors differ in length ({len(a)} vs {len(b)})")
    return math.dist(a, b)


def compatibility_score(distance: float) -> int:
    """Convert a feature distance into an integer score in [0, 100].

    Halves round up, so a raw score of 98.5 becomes 99.
    """
    raw = max(0.0, MAX_SCORE - distance * DISTANCE_PENALTY)
    return int(math.floor(raw + 0.5))


def score_pair(reference: Mapping, candidate: Mapping) -> int:
    return compatibility_score(euclidean_distance(encode_profile(reference), encode_profile(candidate)))


def rank_matches(reference: Mapping, candidates: Iterable[Mapping]) -> list[dict]:
    """Score every candidate against the reference, best match first.

    Returns new dicts (all candidate fields plus ``compatibility``); the
    input records are left untouched. Equal scores keep their input order.
    Excluding the reference's own profile and connected users is up to the
    caller.
    """
    if isinstance(candidates, (Mapping, str, bytes)):
        raise TypeError("candidates must be a collection of profiles")

    reference_vector = encode_profile(reference)

    matches = []
    for candidate in candidates:
        distance = euclidean_distance(reference_vector, encode_profile(candidate))
        matches.append({**candidate, "compatibility": compatibility_score(distance)})

    matches.sort(key=lambda m: m["compatibility"], reverse=True)
    return matches
