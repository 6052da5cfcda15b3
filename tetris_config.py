
CONFIG = {
    "WIDTH": 15,
    "HEIGHT": 30,
    "CELL_SIZE": 30,
    "TICKS_PER_SECOND": 15,
    "HIDDEN_ROWS": 2,
    "SEED": None,
}


def tick_interval_ms() -> int:
    return int(1000 / CONFIG["TICKS_PER_SECOND"])
