import os
from dotenv import load_dotenv

load_dotenv()


def get_board_size() -> int:
    return int(os.getenv("REVERSI_BOARD_SIZE", "8"))


def get_verbose() -> bool:
    return os.getenv("REVERSI_VERBOSE", "0") != "0"


def get_show_moves() -> bool:
    return os.getenv("REVERSI_SHOW_MOVES", "0") != "0"
