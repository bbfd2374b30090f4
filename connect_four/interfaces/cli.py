"""
cli.py - Command-line interface for Connect Four

This module provides the interactive HumanPlayer agent and the SimpleCLI
front end, which plays matches between humans and the random bot or
simulates bot-only matches.
"""

import argparse
import sys
from typing import Callable, List, Optional, Sequence

from connect_four.ai.base import PlayerAgent
from connect_four.ai.random_bot import RandomBot
from connect_four.debug import debug, DebugLevel
from connect_four.game.board import Board
from connect_four.game.errors import ConnectFourError
from connect_four.game.rules import ConnectFourMatch
from connect_four.utils import Token, PlayerSlot

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def request(prompt: str, options: Sequence[int],
            input_fn: InputFn = input, output_fn: OutputFn = print) -> int:
    """
    Ask until the answer is one of ``options``.

    Returns:
        The chosen option
    """
    option_text = "/".join(str(option) for option in options)

    while True:
        answer = input_fn(f"{prompt} [{option_text}]: ").strip()
        try:
            choice = int(answer)
        except ValueError:
            output_fn(f"'{answer}' is not a number.")
            continue

        if choice in options:
            return choice
        output_fn(f"{choice} is not one of {option_text}.")


class HumanPlayer(PlayerAgent):
    """Agent asking a person for each move on the terminal."""

    def __init__(self, name: str, input_fn: InputFn = input, output_fn: OutputFn = print):
        self._name = name
        self.input_fn = input_fn
        self.output_fn = output_fn

    @property
    def name(self) -> str:
        return self._name

    def rename(self, name: str) -> None:
        self._name = name

    def choose_move(self, board: Board, token: Token) -> int:
        self.output_fn(f"{self._name} to play ({token.symbol} = {token})")
        self.output_fn(board.render())

        columns = board.available_columns()
        if len(columns) == 1:
            self.output_fn(f"Only one choice: {columns[0]}")
            return columns[0]

        return request("Choose a column", columns, self.input_fn, self.output_fn)


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, input_fn: InputFn = input, output_fn: OutputFn = print):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.args: Optional[argparse.Namespace] = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug logging (same as --debug-level debug)')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', type=str, default=None,
                            help='Also write log messages to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play interactively')
        play_parser.add_argument('--players', type=int, choices=[1, 2],
                                 help='Number of human players (asked when omitted)')
        play_parser.add_argument('--name1', type=str, help='Name of the first player')
        play_parser.add_argument('--name2', type=str, help='Name of the second player')
        play_parser.add_argument('--seed', type=int, default=None,
                                 help='Seed of the random bot')

        simulate_parser = subparsers.add_parser('simulate', help='Play random bots against each other')
        simulate_parser.add_argument('--games', type=int, default=100,
                                     help='Number of matches to play')
        simulate_parser.add_argument('--seed', type=int, default=None,
                                     help='Seed of the first bot (the second uses seed + 1)')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments and configure logging from them."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the command selected on the command line.

        Returns:
            Process exit code
        """
        if self.args is None:
            self.parse_args(argv)

        try:
            if self.args.command == 'play':
                return self.play_game()
            elif self.args.command == 'simulate':
                return self.simulate()
        except (EOFError, KeyboardInterrupt):
            self.output_fn("\nQuitting.")
            return 0

        self.output_fn("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> int:
        """Play matches until the user declines a rematch."""
        player1 = HumanPlayer(self.args.name1 or "Player 1", self.input_fn, self.output_fn)
        player2 = HumanPlayer(self.args.name2 or "Player 2", self.input_fn, self.output_fn)
        bot = RandomBot("Random bot", seed=self.args.seed)

        match = ConnectFourMatch(player1, player2)

        while True:
            players = self.args.players or request("Number of players", [1, 2],
                                                   self.input_fn, self.output_fn)
            match.set_player(PlayerSlot.SECOND, bot if players == 1 else player2)

            if not self.args.name1:
                player1.rename(self._ask_name("first player") or player1.name)
            if players == 2 and not self.args.name2:
                player2.rename(self._ask_name("second player") or player2.name)

            try:
                outcome = match.play()
            except ConnectFourError as e:
                debug.error(f"Match aborted: {e}", "cli")
                self.output_fn(f"Match aborted: {e}")
                return 1

            self.output_fn(match.board.render())
            if outcome.is_draw:
                self.output_fn("It's a draw!")
            else:
                self.output_fn(f"{outcome.winner} wins!")

            again = self.input_fn("Play again? [y/n]: ").strip().lower()
            if again == 'n':
                return 0

            match.reset()

    def simulate(self) -> int:
        """Play random bot matches and report the tally."""
        games = self.args.games
        if games <= 0:
            self.output_fn("--games must be positive.")
            return 1

        seed = self.args.seed
        first = RandomBot("Bot 1", seed=seed)
        second = RandomBot("Bot 2", seed=None if seed is None else seed + 1)
        match = ConnectFourMatch(first, second)

        tally = {first.name: 0, second.name: 0, None: 0}
        total_moves = 0

        debug.start_timer("simulation")
        for _ in range(games):
            match.reset()
            outcome = match.play()
            tally[outcome.winner] += 1
            total_moves += outcome.moves
        elapsed = debug.end_timer("simulation", "cli")

        self.output_fn(f"Played {games} games, {total_moves} moves in total")
        self.output_fn(f"{first.name} (first, {Token.YELLOW}): {tally[first.name]} wins")
        self.output_fn(f"{second.name} (second, {Token.RED}): {tally[second.name]} wins")
        self.output_fn(f"Draws: {tally[None]}")
        if elapsed is not None:
            self.output_fn(f"{elapsed:.3f} seconds, {elapsed / games * 1000:.3f} ms per game")

        return 0

    def _ask_name(self, who: str) -> str:
        return self.input_fn(f"Name of the {who}: ").strip()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
