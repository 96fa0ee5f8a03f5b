# distance.py
# Damerau-Levenshtein edit distance used as the metric for the BK-tree
# and for name consolidation.
# The unrestricted variant is used (not optimal string alignment) so the
# triangle inequality holds and BK-tree pruning stays sound.

from typing import Optional

from rapidfuzz.distance import DamerauLevenshtein


def edit_distance(a: str, b: str, max_distance: Optional[int] = None) -> int:
    """
    Compute the Damerau-Levenshtein distance between a and b.
    Insertions, deletions, substitutions and adjacent transpositions each cost 1.
    With max_distance set, any distance above it is reported as max_distance + 1,
    which lets callers skip the full computation for far-away strings.
    """
    if a == b:
        return 0

    # bounding: length difference alone already exceeds the cutoff
    if max_distance is not None and abs(len(a) - len(b)) > max_distance:
        return max_distance + 1

    return DamerauLevenshtein.distance(a, b, score_cutoff=max_distance)


def within(a: str, b: str, max_distance: int) -> bool:
    """True if a and b are at most max_distance edits apart."""
    return edit_distance(a, b, max_distance) <= max_distance
