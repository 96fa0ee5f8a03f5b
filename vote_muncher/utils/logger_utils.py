# logger_utils.py -  for logging run messages and performance metrics, timestamps etc

import os
import time
from datetime import datetime
from typing import Optional, TextIO
import sys

# Directory where log files are stored by default
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "vote_muncher.log")

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Log:
    """Lightweight logger for writing run messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        path: Optional[str] = None,
        use_color: bool = True,
        level: str = "INFO",
        echo: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.echo = echo
        self.stream = stream or sys.stderr
        self.set_level(level)

    def set_level(self, level: str) -> None:
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        self.level = level

    def _append(self, line: str) -> None:
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)  # created on first write only
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

    def write(self, level: str, msg: str) -> None:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        Messages below the configured level are dropped.
        """
        if LEVELS.index(level) < LEVELS.index(self.level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        self._append(line)

        if not self.echo:
            return
        # print to console (color enabled etc)
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}", file=self.stream)
        else:
            print(line, file=self.stream)

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (timings, counts, tree stats).
        Always goes to the file; echoed to the console when echo is on.
        Example: [12:45:02] ingest done: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        self._append(line)
        if self.echo:
            print(line, file=self.stream)

    def time_block(self, label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("ingest") as t:
                muncher.process_file(path)
            t.elapsed  # seconds
        It automatically records how long the block took.
        """
        return _Timer(label, self)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label, log: Log):
        self.label = label
        self.log = log
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric."""
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
