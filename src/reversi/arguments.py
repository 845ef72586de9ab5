from __future__ import annotations

from typing import Optional

from reversi import config


class PlayArguments:
    def __init__(self, size: int, verbose: bool, show_moves: bool) -> None:
        self.size = size
        self.verbose = verbose
        self.show_moves = show_moves

    @classmethod
    def from_options(
        cls, size: Optional[int], verbose: bool, show_moves: bool
    ) -> PlayArguments:
        # Command line options win over the environment.
        if size is None:
            size = config.get_board_size()

        return PlayArguments(
            size,
            verbose or config.get_verbose(),
            show_moves or config.get_show_moves(),
        )
