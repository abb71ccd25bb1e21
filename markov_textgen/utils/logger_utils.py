# logger_utils.py - for logging messages and timing metrics

import os
import time
from datetime import datetime
from typing import Optional

from rich.console import Console

# echo to stderr, stdout carries generated text
_err_console = Console(stderr=True)

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """Lightweight logger: optional append-only file plus coloured stderr echo."""
    STYLES = {
        "DEBUG": "dim",
        "INFO": "blue",
        "WARNING": "yellow",
        "ERROR": "bold red",
    }

    def __init__(
        self,
        path: Optional[str] = None,
        level: str = "WARNING",
        use_color: bool = True,
        console: Optional[Console] = None,
    ):
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"unknown log level: {level}")
        self.path = path
        self.level = level
        self.use_color = use_color
        self.console = console or _err_console
        if self.path:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def _write(self, level: str, msg: str):
        """
        Write one entry as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        Entries below the configured level are dropped.
        """
        if not self.enabled(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if self.path:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        style = self.STYLES.get(level) if self.use_color else None
        self.console.print(line, style=style, markup=False, highlight=False)

    # Public logging methods
    def debug(self, msg: str):
        self._write("DEBUG", msg)

    def info(self, msg: str):
        self._write("INFO", msg)

    def warning(self, msg: str):
        self._write("WARNING", msg)

    def error(self, msg: str):
        self._write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (timing, counts) at INFO level.
        Example: [2026-01-01 12:45:02] INFO    | train done: 0.123s
        """
        self.info(f"{tag}: {value}{unit}")

    def time_block(self, label):
        """
        Measure how long a block takes:
            with log.time_block("train"):
                do_some_work()
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to time a code block."""
    def __init__(self, log: Log, label):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        self.log.metric(f"{self.label} done", self.elapsed, "s")
