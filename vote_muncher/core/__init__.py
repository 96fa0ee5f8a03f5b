"""
vote_muncher.core

The approximate name matching engine.
Contains:
 - Damerau-Levenshtein edit distance (edit_distance)
 - name cleanup for log tokens (NameNormalizer)
 - metric-space index over names (BKTree)
 - online vote ingestion with merge rules (VoteLedger)
 - batch clustering of spellings into canonical names (NameConsolidator)
"""

from .distance import edit_distance
from .normalizer import NameNormalizer, UnknownAlphabetError, normalize_name
from .bktree import BKTree
from .ledger import Decision, VoteLedger
from .consolidator import NameConsolidator

__all__ = [
    "edit_distance",
    "NameNormalizer",
    "UnknownAlphabetError",
    "normalize_name",
    "BKTree",
    "Decision",
    "VoteLedger",
    "NameConsolidator",
]
