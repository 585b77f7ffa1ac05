
CONFIG = {
    "CELL_SIZE": 30,
    "BASE_GRAVITY_MS": 1000,
    "LINES_PER_LEVEL": 10,
    "LINE_SCORE": 100,
    "SEED": None,
    "FPS": 60,
    "LOG_LEVEL": "INFO",
}
