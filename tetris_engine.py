
"""Game engine: one state record, imperative operations, owned gravity timer.

Every operation builds the complete next GameState and swaps it in with a
single assignment, so a reader never sees a half-applied transition. Gravity
is a repeating handle on the injected Scheduler; it is cancelled before any
new one is armed and is never live while paused, after game over, or after
close().
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from tetris_board import Board, Contact, empty_board, probe, lock, sweep, drop_distance
from tetris_config import CONFIG
from tetris_piece import Piece
from tetris_rng import UniformRandom
from tetris_timer import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

LEFT, RIGHT, DOWN = "left", "right", "down"
_OFFSETS = {LEFT: (-1, 0), RIGHT: (1, 0), DOWN: (0, 1)}


@dataclass(frozen=True)
class GameState:
    board: Board = field(default_factory=empty_board)
    piece: Optional[Piece] = None
    score: int = 0
    level: int = 1
    lines: int = 0
    game_over: bool = False
    paused: bool = False


def gravity_interval(level: int) -> float:
    return CONFIG["BASE_GRAVITY_MS"] / level


def score_clear(state: GameState, cleared: int) -> GameState:
    """Apply scoring for one clear event.

    Points use the level in force before the clear. The level rises by at
    most one per event, even when several thresholds are crossed at once.
    """
    if cleared <= 0:
        return state
    level = state.level
    if state.lines + cleared >= state.level * CONFIG["LINES_PER_LEVEL"]:
        level += 1
    return replace(
        state,
        lines=state.lines + cleared,
        score=state.score + cleared * CONFIG["LINE_SCORE"] * state.level,
        level=level,
    )


class TetrisEngine:
    def __init__(self, scheduler: Scheduler, rng=None):
        self.scheduler = scheduler
        self.rng = rng if rng is not None else UniformRandom(CONFIG["SEED"])
        self.state = GameState()
        self._gravity: Optional[TimerHandle] = None

    # ---------- context management ----------
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def close(self):
        self._disarm()
        logger.debug("engine closed")

    # ---------- gravity timer ----------
    @property
    def gravity_armed(self) -> bool:
        return self._gravity is not None and self._gravity.active

    def _disarm(self):
        if self._gravity is not None:
            self._gravity.cancel()
            self._gravity = None

    def _rearm(self):
        self._disarm()
        s = self.state
        if s.game_over or s.paused or s.piece is None:
            return
        interval = gravity_interval(s.level)
        self._gravity = self.scheduler.schedule_repeating(interval, self.tick)
        logger.debug("gravity armed at %.1f ms (level %d)", interval, s.level)

    def _commit(self, new: GameState):
        """Swap in the next state and keep the timer in step with it."""
        old = self.state
        self.state = new
        if new.game_over and not old.game_over:
            logger.info("game over: score=%d level=%d lines=%d", new.score, new.level, new.lines)
        if new.level != old.level:
            logger.info("level up: %d -> %d", old.level, new.level)
        if new.game_over or new.paused:
            self._disarm()
        elif new.level != old.level:
            self._rearm()

    # ---------- piece factory ----------
    def _spawn(self, state: GameState) -> GameState:
        piece = Piece.spawn(self.rng.next_piece())
        if probe(state.board, piece) is not Contact.FREE:
            return replace(state, piece=piece, game_over=True)
        return replace(state, piece=piece)

    def _lock_and_spawn(self, state: GameState, piece: Piece) -> GameState:
        board = lock(state.board, piece)
        if board is None:
            return replace(state, game_over=True)
        board, cleared = sweep(board)
        logger.debug("locked %s at (%d,%d), cleared %d", piece.t, piece.x, piece.y, cleared)
        state = score_clear(replace(state, board=board), cleared)
        return self._spawn(state)

    def _playable(self) -> bool:
        s = self.state
        return s.piece is not None and not s.game_over and not s.paused

    # ---------- operations ----------
    def move(self, direction: str):
        if not self._playable(): return
        s = self.state
        dx, dy = _OFFSETS[direction]
        test = s.piece.moved(dx, dy)
        contact = probe(s.board, test)
        if contact is Contact.FREE:
            self._commit(replace(s, piece=test))
        elif contact is Contact.CEILING:
            self._commit(replace(s, game_over=True))
        elif direction == DOWN:
            self._commit(self._lock_and_spawn(s, s.piece))

    def tick(self):
        self.move(DOWN)

    def rotate(self):
        if not self._playable(): return
        s = self.state
        test = s.piece.rotated()
        contact = probe(s.board, test)
        if contact is Contact.FREE:
            self._commit(replace(s, piece=test))
        elif contact is Contact.CEILING:
            self._commit(replace(s, game_over=True))

    def hard_drop(self):
        if not self._playable(): return
        s = self.state
        landed = s.piece.moved(0, drop_distance(s.board, s.piece))
        self._commit(self._lock_and_spawn(s, landed))
        self._rearm()

    def start(self):
        self._disarm()
        self.state = self._spawn(GameState())
        logger.info("game started")
        if self.state.game_over:
            logger.info("game over: no room to spawn")
        self._rearm()

    def toggle_pause(self):
        paused = not self.state.paused
        self._commit(replace(self.state, paused=paused))
        logger.info("paused" if paused else "resumed")
        if not paused:
            self._rearm()
