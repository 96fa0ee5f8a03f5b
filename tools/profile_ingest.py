# tools/profile_ingest.py
"""
Small profiling harness for VoteLedger ingestion and consolidation.
Usage:
  python tools/profile_ingest.py --names 200 --votes 20000 --seed 7

Generates synthetic names, adds random typos to most votes, then prints
per-vote latency stats (mean/median/stdev), consolidation time and tree shape.
"""
import argparse
import random
import statistics
import time

from vote_muncher.core.consolidator import NameConsolidator
from vote_muncher.core.ledger import VoteLedger

FIRST = ["Иван", "Мария", "Алексей", "Ольга", "Дмитрий", "Анна", "Сергей", "Елена"]
LAST = ["Петров", "Сидорова", "Смирнов", "Кузнецова", "Попов", "Волкова", "Соколов", "Лебедева"]
LETTERS = "абвгдеклмнопрстуя"


def make_names(n, rng):
    names = set()
    while len(names) < n:
        names.add(f"{rng.choice(FIRST)} {rng.choice(LAST)}{rng.choice(LETTERS) * rng.randint(0, 2)}")
    return sorted(names)


def typo(name, rng):
    """Apply one random edit: drop, swap neighbours or replace a letter."""
    if len(name) < 3:
        return name
    i = rng.randrange(len(name) - 1)
    kind = rng.choice(("drop", "swap", "replace"))
    if kind == "drop":
        return name[:i] + name[i + 1:]
    if kind == "swap":
        return name[:i] + name[i + 1] + name[i] + name[i + 2:]
    return name[:i] + rng.choice(LETTERS) + name[i + 1:]


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--names", type=int, default=100, help="distinct participants")
    parser.add_argument("--votes", type=int, default=5000, help="votes to ingest")
    parser.add_argument("--typo-rate", type=float, default=0.3, help="share of misspelled votes")
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    names = make_names(args.names, rng)
    stream = []
    for _ in range(args.votes):
        n = rng.choice(names)
        stream.append(typo(n, rng) if rng.random() < args.typo_rate else n)

    ledger = VoteLedger()
    latencies = []
    for name in stream:
        t0 = time.perf_counter()
        ledger.record(name)
        latencies.append((time.perf_counter() - t0) * 1000.0)  # ms

    print("Ingest (ms/vote): mean=%.3f median=%.3f stdev=%.3f max=%.3f" % (
        statistics.mean(latencies),
        statistics.median(latencies),
        statistics.pstdev(latencies),
        max(latencies),
    ))

    t0 = time.perf_counter()
    result = NameConsolidator().consolidate(ledger.votes, ledger.occurrences)
    dt = time.perf_counter() - t0
    print(f"Consolidate: {dt:.3f}s over {len(ledger.occurrences)} spellings -> {len(result)} names")
    print(f"Tree: size={len(ledger.tree)} depth={ledger.tree.depth()}")
    print(f"Votes in = {len(stream)}, votes out = {sum(result.values())}")


if __name__ == "__main__":
    main()
