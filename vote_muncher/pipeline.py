# vote_muncher/pipeline.py
# Glue between a log file and the matching engine:
# line source -> vote extraction -> normalizer -> ledger -> consolidator.

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from vote_muncher.core.consolidator import NameConsolidator
from vote_muncher.core.ledger import VoteLedger
from vote_muncher.core.normalizer import NameNormalizer
from vote_muncher.utils.config_manager import Config

logger = logging.getLogger(__name__)

VOTE_PATTERN = re.compile(r"vote => (.+)")


def extract_vote(line: str) -> Optional[str]:
    """Return the stripped name after 'vote => ', or None for any other line."""
    m = VOTE_PATTERN.search(line)
    if m is None:
        return None
    return m.group(1).strip()


def read_lines(path: Union[str, Path]) -> Iterator[str]:
    """Lazily yield lines of a UTF-8 log file."""
    with Path(path).open("r", encoding="utf-8") as fh:
        for line in fh:
            yield line


class VoteMuncher:
    """
    One run over a vote log.
        muncher = VoteMuncher()
        muncher.process_file("log.txt")
        for name, votes in muncher.results():
            ...
    """

    def __init__(
        self,
        normalizer: Optional[NameNormalizer] = None,
        ledger: Optional[VoteLedger] = None,
        consolidator: Optional[NameConsolidator] = None,
    ):
        self.normalizer = normalizer if normalizer is not None else NameNormalizer()
        self.ledger = ledger if ledger is not None else VoteLedger()
        self.consolidator = consolidator if consolidator is not None else NameConsolidator()
        self.matched = 0
        self.skipped = 0
        self._consolidated: Optional[Dict[str, int]] = None

    @classmethod
    def from_config(cls, cfg: Config) -> "VoteMuncher":
        return cls(
            normalizer=NameNormalizer(cfg["noise_alphabet"], cfg["primary_alphabet"]),
            ledger=VoteLedger(max_distance=cfg["online_max_distance"]),
            consolidator=NameConsolidator(max_distance=cfg["consolidate_max_distance"]),
        )

    # ingestion ---------------------------------------------------------------
    def process_line(self, line: str) -> bool:
        """Feed a single raw log line. Returns True if it carried a vote."""
        raw = extract_vote(line)
        if raw is None:
            self.skipped += 1
            return False
        self.ledger.record(self.normalizer(raw))
        self.matched += 1
        self._consolidated = None
        return True

    def process_lines(self, lines: Iterable[str]) -> int:
        """Feed lines in order. Returns how many of them were votes."""
        before = self.matched
        for line in lines:
            self.process_line(line)
        return self.matched - before

    def process_file(self, path: Union[str, Path]) -> int:
        n = self.process_lines(read_lines(path))
        logger.info("%s: %d votes, %d other lines", path, n, self.skipped)
        return n

    # results -----------------------------------------------------------------
    def consolidate(self) -> Dict[str, int]:
        """Run the batch pass (cached until more lines arrive)."""
        if self._consolidated is None:
            self._consolidated = self.consolidator.consolidate(
                self.ledger.votes, self.ledger.occurrences
            )
        return self._consolidated

    def results(self, top: int = 0) -> List[Tuple[str, int]]:
        """Canonical names with votes, most votes first. top > 0 limits the rows."""
        ranked = sorted(self.consolidate().items(), key=lambda kv: -kv[1])
        return ranked[:top] if top > 0 else ranked

    @property
    def total_votes(self) -> int:
        return sum(self.consolidate().values())
