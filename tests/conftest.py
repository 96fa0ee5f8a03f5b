# tests/conftest.py
import pytest

SAMPLE_LOG = """\
2024-03-01 10:00:01 INFO session started
2024-03-01 10:00:02 INFO vote => Иван Петров
2024-03-01 10:00:03 INFO vote => Иван Петров
2024-03-01 10:00:04 INFO vote => ИванПетров
2024-03-01 10:00:05 INFO vote => Иван Петрв
2024-03-01 10:00:06 INFO vote => Мария Сидорова
2024-03-01 10:00:07 INFO vote => МарияСидорова
2024-03-01 10:00:08 INFO vote => Мария Cидорова
2024-03-01 10:00:09 WARN heartbeat missed
2024-03-01 10:00:10 INFO vote => Алексей Смирнов
2024-03-01 10:00:11 INFO vote => Алксей Смирнов
2024-03-01 10:00:12 INFO vote => Иван Птеров
2024-03-01 10:00:13 INFO session closed
"""

EXPECTED = [("Иван Петров", 5), ("Мария Сидорова", 3), ("Алексей Смирнов", 2)]


@pytest.fixture
def sample_log(tmp_path):
    p = tmp_path / "votes.log"
    p.write_text(SAMPLE_LOG, encoding="utf-8")
    return p
