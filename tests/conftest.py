import sys
from pathlib import Path

import pytest


# Ensure tests can import project packages regardless of how pytest is invoked.
ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


HENDRIX = [
    "Jimi Hendrix Experience : Are You Experienced?",
    "0:03:22 - Foxy Lady",
    "0:03:46 - Manic Depression",
]

CATALOG_TEXT = """Jimi Hendrix Experience : Are You Experienced?
0:03:22 - Foxy Lady
0:03:46 - Manic Depression
0:03:53 - Red House
Pink Floyd : Wish You Were Here
0:13:31 - Shine On You Crazy Diamond (Parts I-V)
0:07:28 - Welcome to the Machine
"""


@pytest.fixture
def hendrix_lines():
    return list(HENDRIX)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "Albums.txt"
    path.write_text(CATALOG_TEXT, encoding="utf-8")
    return path
