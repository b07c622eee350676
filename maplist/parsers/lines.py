from __future__ import annotations

import re

from maplist.schemas.places import DEFAULT_LIST_TITLE

TITLE_PREFIX = "List Name:"

# Metadata written by the scraper panel and page chrome captured along with the list.
NOISE_PREFIXES: tuple[str, ...] = (
    TITLE_PREFIX,
    "Extraction Complete",
    "Found",
    "By ",
    "Hello",
    "Share",
)

_LINE_BREAKS = re.compile(r"\n+")
# "+12" avatar counters next to shared-list owners
_COUNTER = re.compile(r"\+\d+")


def split_lines(text: str) -> list[str]:
    return _LINE_BREAKS.split(text)


def extract_title(lines: list[str]) -> str:
    if lines and lines[0].startswith(TITLE_PREFIX):
        return lines[0][len(TITLE_PREFIX):].strip()
    return DEFAULT_LIST_TITLE


def is_noise(line: str) -> bool:
    if not line.strip():
        return True
    if line.startswith(NOISE_PREFIXES):
        return True
    return _COUNTER.fullmatch(line) is not None


def candidate_lines(lines: list[str]) -> list[str]:
    """Drop blank and metadata lines, keeping input order."""
    return [line for line in lines if not is_noise(line)]
