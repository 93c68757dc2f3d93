"""
Game state machine.

Owns the board, the current piece and the progression counters. A host
drives it with two kinds of calls:

  - ``tick(delta_ms)`` once per frame, with the time elapsed since the last one
  - ``handle(command)`` for every discrete player input

and draws whatever ``snapshot()`` returns. Nothing here touches pygame, so
the whole simulation runs headless under test.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from tetris_board import Board, collide, create_board, ghost_y, merge, sweep
from tetris_config import CONFIG
from tetris_piece import CCW, CW, Piece, random_piece, rotate
from tetris_rng import PieceRandomizer
from tetris_state import GameStats

log = logging.getLogger(__name__)


class GameStatus(Enum):
    NOT_STARTED = auto()
    RUNNING = auto()
    GAME_OVER = auto()


class Command(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SOFT_DROP = auto()
    ROTATE_CW = auto()
    ROTATE_CCW = auto()
    HARD_DROP = auto()
    START = auto()


@dataclass(frozen=True)
class Snapshot:
    board: Tuple[Tuple[Optional[str], ...], ...]
    piece: Optional[Piece]
    ghost_y: Optional[int]
    score: int
    level: int
    lines: int
    status: GameStatus

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING


class Game:
    def __init__(self, rng: Optional[PieceRandomizer] = None,
                 cols: Optional[int] = None, rows: Optional[int] = None):
        self.cols = CONFIG["COLS"] if cols is None else cols
        self.rows = CONFIG["ROWS"] if rows is None else rows
        self.rng = rng if rng is not None else PieceRandomizer(CONFIG["SEED"])
        self.board: Board = create_board(self.cols, self.rows)
        self.current: Optional[Piece] = None
        self.stats = GameStats()
        self.status = GameStatus.NOT_STARTED
        self.drop_counter = 0.0

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING

    # ---------- lifecycle ----------
    def start(self):
        """Start or restart from any status with an empty board."""
        self.board = create_board(self.cols, self.rows)
        self.stats = GameStats()
        self.drop_counter = 0.0
        self.status = GameStatus.RUNNING
        log.info("game started (%dx%d)", self.cols, self.rows)
        self.spawn()

    def spawn(self):
        self.current = random_piece(self.rng, self.cols)
        if collide(self.board, self.current):
            self.status = GameStatus.GAME_OVER
            log.info("game over: score=%d lines=%d level=%d",
                     self.stats.score, self.stats.lines, self.stats.level)

    def clear_lines(self) -> int:
        cleared = sweep(self.board)
        if cleared:
            gained = self.stats.apply_clear(cleared)
            log.debug("cleared %d row(s) for %d points, level %d",
                      cleared, gained, self.stats.level)
        return cleared

    def _lock(self):
        merge(self.board, self.current)
        self.clear_lines()
        self.spawn()

    # ---------- per-frame ----------
    def tick(self, delta_ms: float):
        if not self.running:
            return
        self.drop_counter += delta_ms
        if self.drop_counter > self.stats.drop_interval:
            self.soft_drop()

    # ---------- player actions ----------
    def move(self, dx: int):
        if not self.running or self.current is None:
            return
        self.current.x += dx
        if collide(self.board, self.current):
            self.current.x -= dx

    def soft_drop(self):
        if not self.running or self.current is None:
            return
        self.current.y += 1
        if collide(self.board, self.current):
            self.current.y -= 1
            self._lock()
        self.drop_counter = 0.0

    def hard_drop(self):
        if not self.running or self.current is None:
            return
        while not collide(self.board, self.current):
            self.current.y += 1
        self.current.y -= 1
        self._lock()
        self.drop_counter = 0.0

    def rotate(self, direction: int = CW) -> bool:
        """Rotate the current piece, sweeping x by +1, -2, +3, ... to clear walls.

        Gives up once the next offset would exceed the rotated width, restoring
        the starting shape and x. Returns whether the rotation stuck.
        """
        p = self.current
        if not self.running or p is None:
            return False
        old_x = p.x
        p.shape = rotate(p.shape, direction)
        offset = 1
        while collide(self.board, p):
            p.x += offset
            offset = -(offset + (1 if offset > 0 else -1))
            if abs(offset) > p.width:
                p.shape = rotate(p.shape, -direction)
                p.x = old_x
                return False
        return True

    def handle(self, command) -> None:
        if command is Command.START:
            self.start()
            return
        if not self.running:
            return
        action = {
            Command.MOVE_LEFT: lambda: self.move(-1),
            Command.MOVE_RIGHT: lambda: self.move(1),
            Command.SOFT_DROP: self.soft_drop,
            Command.ROTATE_CW: lambda: self.rotate(CW),
            Command.ROTATE_CCW: lambda: self.rotate(CCW),
            Command.HARD_DROP: self.hard_drop,
        }.get(command)
        if action is not None:
            action()

    # ---------- read side ----------
    def snapshot(self) -> Snapshot:
        piece = self.current.copy() if self.current is not None else None
        gy = ghost_y(self.board, piece) if piece is not None else None
        return Snapshot(
            board=tuple(tuple(row) for row in self.board),
            piece=piece,
            ghost_y=gy,
            score=self.stats.score,
            level=self.stats.level,
            lines=self.stats.lines,
            status=self.status,
        )
