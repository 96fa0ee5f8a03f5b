# tests/test_ledger.py
import random
import unittest
from unittest.mock import patch

from vote_muncher.core.ledger import Decision, VoteLedger


class VoteLedgerRecordTests(unittest.TestCase):
    def setUp(self):
        self.ledger = VoteLedger()

    def test_first_name_is_new(self):
        decision, credited = self.ledger.record("John Smith")
        self.assertEqual(decision, Decision.NEW)
        self.assertEqual(credited, "John Smith")
        self.assertEqual(dict(self.ledger.votes), {"John Smith": 1})
        self.assertEqual(dict(self.ledger.occurrences), {"John Smith": 1})
        self.assertIn("John Smith", self.ledger.tree)

    def test_shorter_variant_credits_existing(self):
        self.ledger.record("John Smith")
        decision, credited = self.ledger.record("Jon Smith")
        self.assertEqual(decision, Decision.CREDITED)
        self.assertEqual(credited, "John Smith")
        self.assertEqual(dict(self.ledger.votes), {"John Smith": 2})
        self.assertEqual(dict(self.ledger.occurrences), {"John Smith": 2})
        # the shorter spelling is never indexed in this branch
        self.assertNotIn("Jon Smith", self.ledger.tree)

    def test_longer_variant_takes_over_votes(self):
        self.ledger.record("Jon Smith")
        self.ledger.record("Jon Smith")
        decision, credited = self.ledger.record("John Smith")
        self.assertEqual(decision, Decision.MERGED)
        self.assertEqual(credited, "John Smith")
        self.assertEqual(dict(self.ledger.votes), {"John Smith": 3})
        self.assertEqual(dict(self.ledger.occurrences), {"Jon Smith": 2, "John Smith": 1})
        # both spellings stay in the append-only tree
        self.assertIn("Jon Smith", self.ledger.tree)
        self.assertIn("John Smith", self.ledger.tree)

    def test_far_names_stay_separate(self):
        self.ledger.record("Alice Johnson")
        decision, _ = self.ledger.record("Bob Martinez")
        self.assertEqual(decision, Decision.NEW)
        self.assertEqual(len(self.ledger), 2)

    def test_merged_away_spelling_can_collect_again(self):
        for name in ("Jon Smith", "John Smith", "John Smithe", "Jon Smith"):
            self.ledger.record(name)
        # exact hit on the old spelling wins over the longer ones
        self.assertEqual(dict(self.ledger.votes), {"John Smithe": 3, "Jon Smith": 1})
        self.assertEqual(self.ledger.total_votes, 4)

    def test_closest_participant_prefers_longer(self):
        self.ledger.tree.insert_many(["abcd", "abcdef"])
        self.assertEqual(self.ledger.closest_participant("abcde"), "abcdef")
        self.assertIsNone(self.ledger.closest_participant("zzzzzzzz"))

    def test_failed_reverification_registers_as_new(self):
        self.ledger.record("John Smith")
        with patch("vote_muncher.core.ledger.edit_distance", return_value=3):
            with self.assertLogs("vote_muncher.core.ledger", level="WARNING"):
                decision, credited = self.ledger.record("Jon Smith")
        self.assertEqual(decision, Decision.FALLBACK)
        self.assertEqual(credited, "Jon Smith")
        self.assertEqual(dict(self.ledger.votes), {"John Smith": 1, "Jon Smith": 1})
        self.assertIn("Jon Smith", self.ledger.tree)
        self.assertEqual(self.ledger.decisions[Decision.FALLBACK], 1)

    def test_negative_radius_rejected(self):
        with self.assertRaises(ValueError):
            VoteLedger(max_distance=-1)


def _noisy_stream(seed, k):
    rng = random.Random(seed)
    base = ["Иван Петров", "Мария Сидорова", "Алексей Смирнов", "Ольга Попова", "Анна"]
    out = []
    for _ in range(k):
        name = rng.choice(base)
        if rng.random() < 0.5 and len(name) > 2:
            i = rng.randrange(len(name) - 1)
            name = name[:i] + name[i + 1] + name[i] + name[i + 2:] if rng.random() < 0.5 else name[:i] + name[i + 1:]
        out.append(name)
    return out


def test_vote_sum_equals_names_processed():
    for seed in range(5):
        stream = _noisy_stream(seed, 300)
        ledger = VoteLedger()
        assert ledger.ingest(stream) == len(stream)
        assert ledger.total_votes == len(stream)
        assert sum(ledger.occurrences.values()) == len(stream)
        assert all(v >= 0 for v in ledger.votes.values())


def test_empty_names_are_counted():
    ledger = VoteLedger()
    ledger.ingest(["", "", "Иван"])
    assert ledger.total_votes == 3
