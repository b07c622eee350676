from __future__ import annotations

import logging
import sys
from pathlib import Path

from maplist.core.config import settings
from maplist.core.logging_config import configure_logging
from maplist.parsers.map_list import parse_map_text

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1:
        print("Usage: python scripts/parse_list.py [path | -]")
        return 2

    configure_logging(log_dir=None, level=settings.log_level)

    if not args or args[0] == "-":
        text = sys.stdin.buffer.read().decode("utf-8", errors="replace")
    else:
        path = Path(args[0])
        if not path.is_file():
            print(f"File not found: {path}")
            return 1
        text = path.read_text(encoding="utf-8", errors="replace")

    result = parse_map_text(text)
    print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
