
CONFIG = {
    "COLS": 10,
    "ROWS": 20,
    "CELL_SIZE": 30,
    "BASE_DROP_MS": 700,
    "MIN_DROP_MS": 120,
    "DROP_STEP_MS": 60,
    "LINES_PER_LEVEL": 10,
    "SEED": None,
    "FPS": 60,
    "LOG_LEVEL": "INFO",
}
