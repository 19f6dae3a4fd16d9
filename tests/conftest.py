"""
This file sets up the fixtures shared by the pagination tests:
a stock collection, recorders for the caller-supplied callbacks, and a default pagination built from them.
"""

import pytest
from rich.text import Text

from chatpages import Pagination
from tests.utils import Recorder

SPELLS = [
    "Acid Splash",
    "Bless",
    "Counterspell",
    "Detect Magic",
    "Eldritch Blast",
    "Fireball",
    "Guidance",
    "Haste",
    "Identify",
    "Jump",
    "Knock",
    "Light",
    "Mage Hand",
]  # 13 items: 3 pages at 6 per page


@pytest.fixture()
def spells():
    return list(SPELLS)


@pytest.fixture()
def row_renderer():
    return Recorder(lambda value, index: [Text(f"{index + 1}. {value}")])


@pytest.fixture()
def page_command():
    return Recorder(lambda page: f"!spells {page}")


@pytest.fixture()
def pagination(row_renderer, page_command):
    return Pagination.builder().build("Spells", row_renderer, page_command)
