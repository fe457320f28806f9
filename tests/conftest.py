import pytest

from context import GameContextStore
from grid import Coord
from snapshot import Snake


@pytest.fixture
def make_snake():
    def _make(snake_id, *body, health=100):
        return Snake(snake_id, snake_id, health, [Coord(x, y) for x, y in body])
    return _make


@pytest.fixture
def store():
    return GameContextStore()


