# vote_muncher/core/ledger.py
"""
VoteLedger
----------
Online ingestion of normalized names. For every incoming name the ledger looks
for an already-registered participant within a small edit radius and either:
 - registers the name as a new participant,
 - merges the existing participant's votes into the new, longer spelling, or
 - credits the vote to the existing participant.

Two tallies are kept side by side:
 - votes: current vote counts (entries can be moved away by a merge)
 - occurrences: how often each spelling was credited; never deleted, used later
   by NameConsolidator to pick canonical spellings.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from vote_muncher.core.bktree import BKTree
from vote_muncher.core.distance import edit_distance

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 2


class Decision(str, Enum):
    NEW = "new"            # registered as a new participant
    MERGED = "merged"      # absorbed a shorter existing spelling
    CREDITED = "credited"  # vote went to an existing participant
    FALLBACK = "fallback"  # match failed re-verification, registered as new


class VoteLedger:
    """
    Keeps the BK-tree and both tallies for one run.
    Public API:
        record(name) -> (decision, credited_name)
        ingest(names)
        closest_participant(name)
        votes / occurrences / tree
        total_votes
    """

    def __init__(self, max_distance: int = DEFAULT_MAX_DISTANCE, tree: Optional[BKTree] = None):
        if max_distance < 0:
            raise ValueError("max_distance must be >= 0")
        self.max_distance = max_distance
        self.tree = tree if tree is not None else BKTree()
        self.votes: Dict[str, int] = defaultdict(int)
        self.occurrences: Dict[str, int] = defaultdict(int)
        self.decisions: Dict[Decision, int] = defaultdict(int)

    # lookup ---------------------------------------------------------------
    def closest_participant(self, name: str) -> Optional[str]:
        """Nearest indexed spelling within the radius, longer spelling wins ties."""
        matches = self.tree.query(name, self.max_distance)
        if not matches:
            return None
        return matches[0][0]

    # ingestion ------------------------------------------------------------
    def _register(self, name: str) -> None:
        self.tree.insert(name)
        self.votes[name] += 1
        self.occurrences[name] += 1

    def record(self, name: str) -> Tuple[Decision, str]:
        """Process one normalized name. Returns the decision and the name that got the vote."""
        closest = self.closest_participant(name)

        if closest is None:
            self._register(name)
            decision, credited = Decision.NEW, name
        elif edit_distance(name, closest) <= self.max_distance:
            if len(name) > len(closest):
                # the new spelling is the more complete one: take over closest's votes
                self.votes[name] += self.votes.pop(closest, 0)
                self.votes[name] += 1
                self.occurrences[name] += 1
                self.tree.insert(name)
                decision, credited = Decision.MERGED, name
            else:
                self.votes[closest] += 1
                self.occurrences[closest] += 1
                decision, credited = Decision.CREDITED, closest
        else:
            logger.warning(
                "match %r for %r failed re-verification (radius %d), registering as new",
                closest, name, self.max_distance,
            )
            self._register(name)
            decision, credited = Decision.FALLBACK, name

        self.decisions[decision] += 1
        logger.debug("%s: %r -> %r", decision.value, name, credited)
        return decision, credited

    def ingest(self, names: Iterable[str]) -> int:
        """Record every name in order. Returns how many were processed."""
        n = 0
        for name in names:
            self.record(name)
            n += 1
        return n

    # stats ----------------------------------------------------------------
    @property
    def total_votes(self) -> int:
        return sum(self.votes.values())

    def __len__(self) -> int:
        """Number of participants currently holding votes."""
        return len(self.votes)
