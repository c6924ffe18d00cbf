# logger_utils.py -  for logging build progress, skipped records and timings

import os
import sys
import time
from datetime import datetime
from typing import Optional

# Directory where log files are stored
LOG_DIR = "logs"

# Path to the default log file, can be overriden (tests point it at tmp dirs)
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "listing_autocompleter.log")

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
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
        level: str = "INFO",
        use_color: bool = True,
        echo: bool = False,
    ):
        self.path = path
        self.use_color = use_color
        self.echo = echo
        self.set_level(level)

    def set_level(self, level: str) -> None:
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"unknown log level: {level}")
        self.level = level

    @property
    def file_path(self) -> str:
        # resolved per write so DEFAULT_LOG_PATH can be swapped at runtime
        return self.path or DEFAULT_LOG_PATH

    def enabled_for(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def write(self, level: str, msg: str) -> None:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        Console echo goes to stderr so prompt output on stdout stays clean.
        """
        if not self.enabled_for(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        path = self.file_path
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if not self.echo:
            return
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}", file=sys.stderr)
        else:
            print(line, file=sys.stderr)

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
        Record a metric (timing, counts) at INFO level.
        Example line: ... INFO    | build done: 0.123s
        """
        self.write("INFO", f"{tag}: {value}{unit}")

    def time_block(self, label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("ingest remax"):
                do_some_work()
        The elapsed seconds are logged and kept on the timer as `.elapsed`.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """On exit record how long the block took, even when it raised."""
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")


# shared instance for modules that are not handed one
log = Log()
