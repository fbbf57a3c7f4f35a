#!/usr/bin/env python3
"""Play against the engine over stdin/stdout."""

import argparse
import sys
from pathlib import Path

from rich.console import Console

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pocketbot.bot.policy import BettingPolicy, PolicyConfig
from pocketbot.game.categorizer import HandCategorizer, TreysRanker
from pocketbot.parser import EngineParser


def main():
    parser = argparse.ArgumentParser(
        description="Run the bot against an engine speaking the line protocol"
    )
    parser.add_argument(
        "--ranker",
        choices=["treys", "counting"],
        default="treys",
        help="Hand ranking backend (default: treys)",
    )
    parser.add_argument(
        "--strong-odds",
        type=float,
        default=0.55,
        help="Pre-flop win odds above which we always raise (default: 0.55)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Report each decision on stderr",
    )

    args = parser.parse_args()
    # stdout belongs to the engine
    console = Console(stderr=True)

    ranker = TreysRanker() if args.ranker == "treys" else None
    policy = BettingPolicy(
        config=PolicyConfig(strong_preflop_odds=args.strong_odds),
        categorizer=HandCategorizer(ranker=ranker),
    )
    engine = EngineParser(policy)

    for line in sys.stdin:
        try:
            action = engine.parse_line(line)
        except ValueError as e:
            console.print(f"[red]Skipping line:[/] {e}")
            continue
        if action is None:
            continue

        print(action, flush=True)
        if args.verbose:
            console.print(
                f"[dim]round {engine.round}[/] {engine.build_state().hand} "
                f"-> [bold]{action}[/] "
                f"(committed {policy.ledger.committed_so_far()})"
            )

    return 0


if __name__ == "__main__":
    sys.exit(main())
