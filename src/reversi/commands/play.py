import typer
from typing import Annotated, Optional

from reversi.arguments import PlayArguments
from reversi.display import PLAYER_NAMES, indexes_to_fields, render
from reversi.othello.board import InvalidSize
from reversi.othello.capture import InvalidMove, Move
from reversi.othello.game import Game, InvalidInput
from reversi.prompt import parse_move

app = typer.Typer(pretty_exceptions_enable=False)


class PlayCommand:
    def __init__(self, args: PlayArguments) -> None:
        self.args = args
        self.game = Game.start(args.size)

    def show(self) -> None:
        legal_moves: set[int] = set()
        if self.args.show_moves:
            legal_moves = self.game.legal_moves()

        print(render(self.game.snapshot(), legal_moves))

    def read_move(self) -> Optional[tuple[int, int]]:
        player = PLAYER_NAMES[self.game.turn]

        while True:
            try:
                text = input(f"{player} move (row column, q to quit): ")
            except EOFError:
                return None

            try:
                return parse_move(text, self.game.size)
            except InvalidInput as e:
                print(f"Invalid input: {e}")

    def report_move(self, move: Move, passes_before: int) -> None:
        if not self.args.verbose:
            return

        size = self.game.size
        print(f"Captured: {indexes_to_fields(move.flipped(), size)}")

        for passed in self.game.passes[passes_before:]:
            print(f"{PLAYER_NAMES[passed]} has no legal moves and passes")

    def report_result(self) -> None:
        print(render(self.game.snapshot()))

        termination = self.game.termination
        assert termination is not None
        print(f"Game over: {termination.value.replace('_', ' ')}")

        winner = self.game.winner()
        if winner is None:
            print("Result: draw")
        else:
            print(f"Result: {PLAYER_NAMES[winner]} wins")

    def __call__(self) -> None:
        while not self.game.is_over():
            self.show()

            coordinates = self.read_move()
            if coordinates is None:
                self.game.quit()
                break

            row, col = coordinates
            passes_before = len(self.game.passes)

            try:
                move = self.game.play(row, col)
            except (InvalidMove, InvalidInput) as e:
                print(f"Invalid move: {e}")
                continue

            self.report_move(move, passes_before)

        self.report_result()


@app.command()
def play(
    size: Annotated[Optional[int], typer.Option("--size", "-n")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
    show_moves: Annotated[bool, typer.Option("--show-moves", "-m")] = False,
) -> None:
    args = PlayArguments.from_options(size, verbose, show_moves)

    try:
        command = PlayCommand(args)
    except InvalidSize as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)

    command()


if __name__ == "__main__":
    app()
