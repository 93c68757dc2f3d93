"""Score, lines, level and gravity progression"""
from dataclasses import dataclass, field

from tetris_config import CONFIG

POINTS = [0, 100, 300, 500, 800]   # indexed by rows cleared in one lock, multiplied by level


def drop_interval_ms(level: int) -> int:
    base, step, floor = CONFIG["BASE_DROP_MS"], CONFIG["DROP_STEP_MS"], CONFIG["MIN_DROP_MS"]
    return max(floor, base - (level - 1) * step)


@dataclass
class GameStats:
    score: int = 0
    lines: int = 0
    level: int = 1
    drop_interval: int = field(default_factory=lambda: drop_interval_ms(1))

    def apply_clear(self, cleared: int) -> int:
        """Credit `cleared` rows from a single lock and return the points awarded."""
        if cleared <= 0:
            return 0
        if cleared >= len(POINTS):
            raise ValueError(f"cannot clear {cleared} rows with one piece")
        gained = POINTS[cleared] * self.level
        self.score += gained
        self.lines += cleared
        self.level = self.lines // CONFIG["LINES_PER_LEVEL"] + 1
        self.drop_interval = drop_interval_ms(self.level)
        return gained
