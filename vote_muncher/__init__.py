"""
vote_muncher

Fuzzy vote tallying over names pulled from log files: typo-tolerant
matching while streaming, then a consolidation pass that merges spelling
variants under one canonical name.
"""

from vote_muncher.core import BKTree, NameConsolidator, NameNormalizer, VoteLedger, edit_distance
from vote_muncher.pipeline import VoteMuncher

__all__ = [
    "BKTree",
    "NameConsolidator",
    "NameNormalizer",
    "VoteLedger",
    "VoteMuncher",
    "edit_distance",
]

__version__ = "0.1.0"
