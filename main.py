"""
Console script for playing TicTacToe against the engine.

Run this script to play TicTacToe in the terminal!
"""

import asyncio

from tictactoe_ai.ai_player import MinimaxSearch
from tictactoe_ai.board import Player
from tictactoe_ai.config import EngineConfig
from tictactoe_ai.decision_engine import DecisionEngine
from tictactoe_ai.logging_setup import setup_logging
from tictactoe_ai.match import Match
from tictactoe_ai.strategies import Difficulty

HELP_TEXT = """Commands:
  1-9       place your mark (cells are numbered like a phone keypad)
  row,col   place your mark by row and column (0-2)
  h         ask for a hint
  d LEVEL   change difficulty (easy, medium, hard)
  r         start a new game (score is kept)
  q         quit"""


class ConsoleGame:
    """
    Terminal front end for a Match.

    Game flow:
    1. Human (X unless --engine-first) enters a move
    2. Engine thinks for a moment and replies
    3. Repeat until someone wins or it's a draw
    4. Show the score and start the next game
    """

    def __init__(self, match: Match):
        self.match = match
        self.is_running = False

    def start(self):
        """Start playing."""
        print("\n" + "="*60)
        print("   TicTacToe")
        print(f"   You play: {self.match.human_side.value}")
        print(f"   Computer plays: {self.match.engine.get_side().value}")
        print(f"   Difficulty: {self.match.engine.get_difficulty().value}")
        print("="*60)
        print(HELP_TEXT)

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop. Only engine moves run on an event loop."""
        while self.is_running:
            if self.match.is_game_over:
                self._show_game_result()
                answer = input("\nPlay again? [Y/n] ").strip().lower()
                if answer in ("n", "no", "q"):
                    break
                self.match.reset_game()
                continue

            if self.match.is_engine_turn():
                self._engine_turn()
                continue

            print("\n" + self.match.board.render())
            self._handle_command(input("Your move: "))

    def _engine_turn(self):
        """Let the computer move, waiting out its think delay."""
        print("\nComputer is thinking...")
        move = asyncio.run(self.match.make_engine_move())
        if move is not None:
            print(f"Computer plays {move + 1}")

    def _handle_command(self, text: str):
        """Run one line of user input."""
        command = text.strip().lower()

        if command in ("q", "quit", "exit"):
            self.is_running = False
        elif command in ("h", "hint"):
            self._show_hint()
        elif command in ("r", "reset"):
            self.match.reset_game()
            print("Game reset!")
        elif command.startswith("d"):
            level = command[1:].strip()
            try:
                self.match.set_difficulty(level)
            except ValueError as e:
                print(e)
            else:
                print(f"Difficulty is now {self.match.engine.get_difficulty().value}")
        elif command in ("?", "help"):
            print(HELP_TEXT)
        else:
            parsed = self.match.validator.parse_index(command)
            if not parsed.is_valid:
                print(parsed.error_message)
                return
            result = self.match.make_player_move(parsed.index)
            if not result.is_valid:
                print(result.error_message)

    def _show_hint(self):
        """Print the minimax scores of every free cell."""
        scores = MinimaxSearch(self.match.human_side).score_moves(self.match.board)
        # max() keeps the first of equal scores, same as the engine
        best = max(scores, key=scores.get)
        labels = {
            EngineConfig.WIN_SCORE: "win",
            EngineConfig.DRAW_SCORE: "draw",
            EngineConfig.LOSS_SCORE: "loss",
        }
        summary = ", ".join(
            f"{index + 1}:{labels.get(score, score)}" for index, score in scores.items()
        )
        print(f"Hint: play {best + 1} ({summary})")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        print(self.match.board.render())

        winner = self.match.winner
        if winner is None:
            print("\nIt's a draw! Good game!")
        elif winner == self.match.human_side:
            print("\nCongratulations! You won!")
        else:
            print("\nComputer wins! Better luck next time!")

        score = self.match.score
        print(f"\nScore - You: {score.player}  Computer: {score.computer}  Draws: {score.draws}")
        print("="*60)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Play TicTacToe against the computer")
    parser.add_argument(
        "--difficulty",
        choices=[level.value for level in Difficulty],
        default=EngineConfig.DEFAULT_DIFFICULTY,
        help="Computer strength (default: %(default)s)"
    )
    parser.add_argument(
        "--engine-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=EngineConfig.THINK_DELAY_SECONDS,
        help="Seconds the computer 'thinks' before moving (default: %(default)s)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level, e.g. DEBUG (default: LOG_LEVEL env or INFO)"
    )

    args = parser.parse_args()

    setup_logging(args.log_level)

    # X always moves first
    engine_side = Player.X if args.engine_first else EngineConfig.ENGINE_SIDE
    engine = DecisionEngine(
        difficulty=args.difficulty,
        side=engine_side,
        think_delay=args.delay
    )
    game = ConsoleGame(Match(engine=engine))

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
