from __future__ import annotations

import pytest

from quadmap.tree import Quadtree
from quadmap.utils.loggers import get_logger

# Bind the package log handler before any CliRunner swaps the std streams.
get_logger()


@pytest.fixture
def tree16() -> Quadtree:
    return Quadtree(4)
