#!/usr/bin/env python3
"""Show how the bot reads a single spot."""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pocketbot.bot.actions import Action, ActionType
from pocketbot.bot.policy import BettingPolicy
from pocketbot.bot.state import BotState
from pocketbot.game.cards import Hand, parse_cards
from pocketbot.game.categorizer import HandCategorizer, TreysRanker
from pocketbot.game.starting_hands import hand_key


def main():
    parser = argparse.ArgumentParser(
        description="Categorize a hand and show the bot's decision"
    )
    parser.add_argument(
        "hand",
        help="Hole cards (e.g., 'AsAh')",
    )
    parser.add_argument(
        "-b", "--board",
        default="",
        help="Board cards (e.g., 'AsKhTd' or 'As Kh Td')",
    )
    parser.add_argument("--bb", type=int, default=20, help="Big blind (default: 20)")
    parser.add_argument("--sb", type=int, default=10, help="Small blind (default: 10)")
    parser.add_argument("-s", "--stack", type=int, default=2000, help="Our stack (default: 2000)")
    parser.add_argument(
        "--opp-stack",
        type=int,
        default=2000,
        help="Opponent stack (default: 2000)",
    )
    parser.add_argument(
        "-c", "--to-call",
        type=int,
        default=0,
        help="Amount to call (default: 0)",
    )
    parser.add_argument(
        "--opp-raised",
        action="store_true",
        help="Opponent's last action was a raise",
    )
    parser.add_argument(
        "--ranker",
        choices=["treys", "counting"],
        default="treys",
        help="Hand ranking backend (default: treys)",
    )

    args = parser.parse_args()
    console = Console()

    try:
        hand = Hand.from_string(args.hand)
        board = parse_cards(args.board)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return 1

    if len(board) not in (0, 3, 4, 5):
        console.print("[red]Board must have 0, 3, 4 or 5 cards[/]")
        return 1

    ranker = TreysRanker() if args.ranker == "treys" else None
    categorizer = HandCategorizer(ranker=ranker)
    policy = BettingPolicy(categorizer=categorizer)

    state = BotState(
        hand=hand,
        board=board,
        big_blind=args.bb,
        small_blind=args.sb,
        stack=args.stack,
        opponent_stack=args.opp_stack,
        amount_to_call=args.to_call,
        opponent_action=Action(ActionType.RAISE, args.to_call) if args.opp_raised else None,
    )

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Hand", f"{hand} ({hand_key(hand)})")
    table.add_row("Board", " ".join(str(c) for c in board) or "-")
    table.add_row("Category", categorizer.hand_category(hand, board).label)
    if board:
        table.add_row("Board category", categorizer.board_category(board).label)
    else:
        table.add_row("Win odds", f"{policy.preflop_win_odds(state):.2%}")

    action = policy.decide(state)
    table.add_row("Decision", f"[green]{action}[/]")

    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
