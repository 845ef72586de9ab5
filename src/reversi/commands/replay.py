import typer
from typing import Annotated, Optional

from reversi import config
from reversi.display import render
from reversi.othello.board import InvalidSize
from reversi.othello.capture import InvalidMove
from reversi.othello.game import Game, GameOver, InvalidInput
from reversi.prompt import parse_move

app = typer.Typer(pretty_exceptions_enable=False)


def parse_moves(fields: list[str], size: int) -> list[tuple[int, int]]:
    moves: list[tuple[int, int]] = []

    for field in fields:
        coordinates = parse_move(field, size)
        if coordinates is None:
            raise InvalidInput(f'Unexpected quit in move list: "{field}"')
        moves.append(coordinates)

    return moves


@app.command()
def replay(
    moves: Annotated[list[str], typer.Argument(help="Moves such as 3d 5c")],
    size: Annotated[Optional[int], typer.Option("--size", "-n")] = None,
) -> None:
    if size is None:
        size = config.get_board_size()

    try:
        game = Game.from_moves(parse_moves(moves, size), size)
    except (InvalidSize, InvalidInput, InvalidMove, GameOver) as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)

    print(render(game.snapshot()))

    if game.is_over():
        assert game.termination is not None
        print(f"Game over: {game.termination.value.replace('_', ' ')}")


if __name__ == "__main__":
    app()
