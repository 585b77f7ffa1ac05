import itertools

import pytest

from tetris_engine import TetrisEngine
from tetris_timer import Scheduler


class FixedSequence:
    """Deterministic stand-in for the randomizer: cycles through the given kinds."""
    def __init__(self, *kinds):
        self._it = itertools.cycle(kinds)

    def next_piece(self):
        return next(self._it)


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def make_engine(scheduler):
    engines = []

    def _make(*kinds):
        e = TetrisEngine(scheduler, FixedSequence(*(kinds or ("O",))))
        engines.append(e)
        return e

    yield _make
    for e in engines:
        e.close()
