import os
import tempfile
from pathlib import Path

_tmpdir = Path(tempfile.mkdtemp(prefix="maplist_test_"))

os.environ.setdefault("LOG_DIR", str(_tmpdir / "logs"))
os.environ.setdefault("MAX_INPUT_CHARS", "2000")
os.environ.setdefault("PARSE_RATE_LIMIT", "5")
os.environ.setdefault("PARSE_RATE_WINDOW_SECONDS", "60")

import pytest
from fastapi.testclient import TestClient

from maplist.main import create_app
from maplist.core.rate_limit import _reset_for_tests


TOKYO_TRIP = (
    "List Name: Tokyo Trip\n\n"
    "Ramen Ikkousha | 4.5 | (1,234) | Ramen · $$ [LINK: https://maps.google.com/x]\n\n"
)


@pytest.fixture()
def tokyo_trip() -> str:
    return TOKYO_TRIP


@pytest.fixture()
def client():
    _reset_for_tests()
    app = create_app()
    with TestClient(app) as c:
        yield c
    _reset_for_tests()
