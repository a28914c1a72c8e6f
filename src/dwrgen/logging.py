"""Run log for dwrgen.

Every invocation and every notable generation event (entities found,
lossy translations, skips, write failures) is appended as one line:

    2026-01-05T10:12:00.123456 | WARNING | Person.extra: map type Map rendered as any

The log lives in ``.dwrgen-logs/`` next to the project, never inside the
output directory, since that directory is wiped on every run.
"""

import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGS_DIR = ".dwrgen-logs"
GENERATOR_LOG_FILE = "generator.log"
MAX_LOG_BYTES = 10 * 1024 * 1024
SEPARATOR = " | "

INFO = "INFO"
WARNING = "WARNING"
ERROR = "ERROR"
COMMAND = "COMMAND"


@dataclass(frozen=True)
class LogEntry:
    timestamp: str
    level: str
    message: str

    def format(self) -> str:
        return SEPARATOR.join((self.timestamp, self.level, self.message))

    @classmethod
    def parse(cls, line: str) -> Optional["LogEntry"]:
        parts = line.split(SEPARATOR, 2)
        if len(parts) < 2:
            return None
        return cls(parts[0], parts[1], parts[2] if len(parts) == 3 else "")


def get_logs_path(base_path: Optional[Path] = None) -> Path:
    """Directory holding the run log for a project (cwd by default)."""
    return (base_path or Path.cwd()) / LOGS_DIR


def get_log_file(base_path: Optional[Path] = None) -> Path:
    return get_logs_path(base_path) / GENERATOR_LOG_FILE


def is_logging_enabled(base_path: Optional[Path] = None) -> bool:
    """Whether ``command_logging`` is on in dwrgen.json.

    A missing or unreadable config file leaves logging on.
    """
    from .config import get_config_path
    from .storage import read_json

    config_file = get_config_path(base_path)
    try:
        settings = read_json(config_file) if config_file.exists() else {}
    except (OSError, ValueError):
        return True
    return bool(settings.get("command_logging", True))


def _rotate_if_large(log_file: Path) -> None:
    if log_file.exists() and log_file.stat().st_size > MAX_LOG_BYTES:
        log_file.replace(log_file.with_name(GENERATOR_LOG_FILE + ".1"))


def log_event(level: str, message: str, base_path: Optional[Path] = None) -> None:
    """Append one entry to the run log.

    Args:
        level: INFO, WARNING, ERROR or COMMAND.
        message: Entry text; newlines are flattened so one entry stays one line.
        base_path: Project root. Defaults to cwd.
    """
    if not is_logging_enabled(base_path):
        return

    log_file = get_log_file(base_path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    _rotate_if_large(log_file)

    entry = LogEntry(datetime.now().isoformat(), level, " ".join(message.splitlines()))
    with log_file.open("a", encoding="utf-8") as f:
        f.write(entry.format() + "\n")


def log_warnings(warnings: list[str], base_path: Optional[Path] = None) -> None:
    for warning in warnings:
        log_event(WARNING, warning, base_path)


def log_from_cli() -> None:
    """Record the dwrgen command line being run (called from the CLI callback)."""
    argv = sys.argv[1:]
    if not argv:
        return
    log_event(COMMAND, " ".join(repr(a) if " " in a else a for a in argv))


def parse_log_file(base_path: Optional[Path] = None) -> list[LogEntry]:
    """Read the run log back, oldest entry first. Malformed lines are dropped."""
    log_file = get_log_file(base_path)
    if not log_file.exists():
        return []

    with log_file.open("r", encoding="utf-8") as f:
        entries = (LogEntry.parse(line.rstrip("\n")) for line in f if line.strip())
        return [e for e in entries if e is not None]
