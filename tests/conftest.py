"""Shared test fixtures."""

from collections import deque
from typing import Callable, Iterable, Sequence

import pytest

from qrpg.core.events import event_bus
from qrpg.world.level import Level
from qrpg.world.tiles import Tile


class ScriptedRandom:
    """Random source that replays fixed draws in order."""

    def __init__(self, ints: Iterable[int], floats: Iterable[float] = ()) -> None:
        self._ints = deque(ints)
        self._floats = deque(floats)

    def randint(self, a: int, b: int) -> int:
        assert self._ints, "ran out of scripted integer draws"
        value = self._ints.popleft()
        assert a <= value <= b, f"scripted draw {value} outside [{a}, {b}]"
        return value

    def random(self) -> float:
        assert self._floats, "ran out of scripted float draws"
        return self._floats.popleft()

    @property
    def exhausted(self) -> bool:
        return not self._ints and not self._floats


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def open_level() -> Callable[[int, int], Level]:
    """Factory for a level that is floor everywhere except a wall border."""

    def make(width: int = 20, height: int = 20) -> Level:
        level = Level(width, height)
        for y in range(1, height - 1):
            for x in range(1, width - 1):
                level.set_tile(x, y, Tile.floor())
        return level

    return make


@pytest.fixture(autouse=True)
def clear_event_queue():
    """Drop events left behind by a test."""
    yield
    event_bus.clear()


def reachable_floor(level: Level, start: Sequence[int]) -> set[tuple[int, int]]:
    """Flood fill over floor tiles from start."""
    seen = {tuple(start)}
    queue = deque([tuple(start)])
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (nx, ny) in seen or not level.in_bounds(nx, ny):
                continue
            if level.get_tile(nx, ny).blocked:
                continue
            seen.add((nx, ny))
            queue.append((nx, ny))
    return seen


@pytest.fixture
def flood_fill() -> Callable[[Level, Sequence[int]], set[tuple[int, int]]]:
    """Floor reachability helper."""
    return reachable_floor
