# logger_utils.py - logging messages and timing metrics for training, walks and persistence

import os
import time
from datetime import datetime
from typing import Optional

# Directory where log files are stored (created on first write, not on import)
LOG_DIR = "logs"

# Path to the default log file, can be overriden with Log.configure
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "markov_walker.log")

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    path = DEFAULT_LOG_PATH
    echo = False       # also print each line to the console
    use_color = True

    @classmethod
    def configure(cls, path: Optional[str] = None, echo: Optional[bool] = None,
                  use_color: Optional[bool] = None):
        """Redirect the log file and/or toggle console output."""
        if path is not None:
            cls.path = path
        if echo is not None:
            cls.echo = echo
        if use_color is not None:
            cls.use_color = use_color

    @classmethod
    def write(cls, msg: str, level: str = "INFO"):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        level = level.upper()
        if level not in LEVELS:
            level = "INFO"
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        folder = os.path.dirname(cls.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(cls.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if cls.echo:
            if cls.use_color:
                print(f"{cls.COLORS[level]}{line}{cls.COLORS['RESET']}")
            else:
                print(line)

    # Public logging shorthands
    @classmethod
    def debug(cls, msg: str):
        cls.write(msg, "DEBUG")

    @classmethod
    def info(cls, msg: str):
        cls.write(msg, "INFO")

    @classmethod
    def warning(cls, msg: str):
        cls.write(msg, "WARNING")

    @classmethod
    def error(cls, msg: str):
        cls.write(msg, "ERROR")

    @classmethod
    def metric(cls, tag, value, unit=""):
        """
        Record a metric (timing, counts, sizes).
        Example: train_corpus done: 0.012s
        """
        cls.write(f"{tag}: {value}{unit}", "INFO")

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("MarkovChain.train"):
                chain.add_sequence(tokens)
        It automatically logs how long the block took.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        status = "done" if exc_type is None else "failed"
        Log.metric(f"{self.label} {status}", round(self.elapsed, 3), "s")
        return False
