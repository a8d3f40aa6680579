"""
Config file handling.

The format is one ``key = value`` pair per line. Lines that do not look
like that are ignored, and a later key replaces an earlier one.
"""

from typing import Dict, Iterable
import logging
import re

from .errors import ConfigLoadError
from .settings import get_settings

logger = logging.getLogger(__name__)

LINE_RE = re.compile(r"^\s*(\S+)\s*=\s*(.+)")


def config_file() -> str:
    """Path to the config file, from GIT_SHIP_CONFIG or the default."""
    return get_settings().config


def parse_config(lines: Iterable[str]) -> Dict[str, str]:
    """Parse ``key = value`` lines into a mapping."""
    config: Dict[str, str] = {}

    for line in lines:
        line = line.rstrip("\r\n")
        logger.debug(f"[ship::config] {line}")
        match = LINE_RE.match(line)
        if match:
            config[match.group(1)] = match.group(2)

    return config


def load_config(path: str) -> Dict[str, str]:
    """Read and parse the config file at ``path``."""
    try:
        with open(path, encoding="utf-8") as fh:
            return parse_config(fh)
    except OSError as e:
        raise ConfigLoadError(path, e) from e


def write_config(path: str, config: Dict[str, str]) -> None:
    """Write ``config`` to ``path`` as ``key = value`` lines."""
    try:
        with open(path, "w", encoding="utf-8") as fh:
            for key in sorted(config):
                fh.write(f"{key} = {config[key]}\n")
    except OSError as e:
        raise ConfigLoadError(path, e, action="Write") from e

    logger.info(f"Wrote {len(config)} keys to {path}")


def append_config(path: str, config: Dict[str, str]) -> None:
    """Add ``config`` to the end of ``path``, leaving existing lines alone."""
    try:
        with open(path, "a+", encoding="utf-8") as fh:
            fh.seek(0)
            text = fh.read()
            if text and not text.endswith("\n"):
                fh.write("\n")
            for key in sorted(config):
                fh.write(f"{key} = {config[key]}\n")
    except OSError as e:
        raise ConfigLoadError(path, e, action="Write") from e

    logger.info(f"Appended {len(config)} keys to {path}")
