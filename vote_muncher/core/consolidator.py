# vote_muncher/core/consolidator.py
"""
NameConsolidator - batch post-pass run once after ingestion.

Online matching only ever compares a name with what was indexed before it, so
clusters can end up split (e.g. two spellings that met the tree in an unlucky
order). This pass looks at every spelling ever seen and, cluster by cluster,
picks one canonical name and remaps the votes onto it.

Clustering is greedy and best-effort:
 - iterate names in first-seen order, skipping ones already mapped
 - the cluster is every known name within max_distance (linear scan, O(D^2) overall)
 - canonical = most occurrences, then longest; earlier in frequency order wins exact ties
 - every cluster member is (re)mapped to the canonical name
 - chains left by remapping (a -> b, b -> c) are followed so a lands on c
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Mapping

from vote_muncher.core.distance import within

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 5


class NameConsolidator:
    def __init__(self, max_distance: int = DEFAULT_MAX_DISTANCE):
        if max_distance < 0:
            raise ValueError("max_distance must be >= 0")
        self.max_distance = max_distance
        self.name_map: Dict[str, str] = {}

    @staticmethod
    def frequency_map(occurrences: Mapping[str, int]) -> Dict[str, int]:
        """Occurrence counts ordered by descending count (stable for equal counts)."""
        return dict(sorted(occurrences.items(), key=lambda kv: -kv[1]))

    def similar_names(self, name: str, frequency: Mapping[str, int]) -> List[str]:
        """All names in frequency (in its order) within max_distance of name, name included."""
        return [c for c in frequency if within(name, c, self.max_distance)]

    @staticmethod
    def choose_canonical(candidates: List[str], occurrences: Mapping[str, int]) -> str:
        # max() keeps the first of equal keys, so frequency order breaks exact ties
        return max(candidates, key=lambda c: (occurrences.get(c, 0), len(c)))

    def build_name_map(self, occurrences: Mapping[str, int]) -> Dict[str, str]:
        """Resolve clusters over every name in occurrences. Result maps name -> canonical."""
        frequency = self.frequency_map(occurrences)
        name_map: Dict[str, str] = {}
        clusters = 0

        for name in occurrences:
            if name in name_map:
                continue
            candidates = self.similar_names(name, frequency)
            canonical = self.choose_canonical(candidates, occurrences)
            for candidate in candidates:
                name_map[candidate] = canonical
            clusters += 1
            if len(candidates) > 1:
                logger.debug("cluster %r <- %s", canonical, candidates)

        name_map = self._close(name_map)
        logger.info("consolidated %d spellings into %d clusters", len(occurrences), clusters)
        self.name_map = name_map
        return name_map

    @staticmethod
    def _close(name_map: Dict[str, str]) -> Dict[str, str]:
        """
        Follow remapped canonicals to their final spelling, so every value maps to itself.
        A later cluster can take over an earlier canonical name (a -> b, then b -> c).
        """
        closed: Dict[str, str] = {}
        for name, target in name_map.items():
            seen = {name}
            while name_map.get(target, target) != target and target not in seen:
                seen.add(target)
                target = name_map[target]
            closed[name] = target
        return closed

    def consolidate(self, votes: Mapping[str, int], occurrences: Mapping[str, int]) -> Dict[str, int]:
        """
        Remap votes onto canonical names. Names missing from the map keep their own spelling.
        The total of the result always equals the total of votes.
        """
        name_map = self.build_name_map(occurrences)
        consolidated: Dict[str, int] = defaultdict(int)
        for name, count in votes.items():
            consolidated[name_map.get(name, name)] += count
        return dict(consolidated)

    def canonical_of(self, name: str) -> str:
        """Canonical spelling from the last build_name_map run (the name itself if unmapped)."""
        return self.name_map.get(name, name)
