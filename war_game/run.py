#!/usr/bin/env python3
"""
Main entry point for the War card game.
Play a game in the terminal or run a batch of simulated games.
"""

import argparse
import logging
import random
from war_game.game import WarGame
from war_game.simulation import SimulationRunner, DEFAULT_MAX_ROUNDS
from war_game.utils import setup_logging, format_round_outcome, format_snapshot


def run_interactive_game(seed: int = None, auto: bool = False,
                         max_rounds: int = DEFAULT_MAX_ROUNDS) -> dict:
    """Play one game, one round per Enter key press unless auto is set."""
    game = WarGame(rng=random.Random(seed))
    snapshot = game.start_game()

    print("🃏 Starting War 🃏")
    print(format_snapshot(snapshot))

    try:
        while not game.is_over and game.round_number < max_rounds:
            if not auto:
                command = input("\nPress Enter to play a card (q to quit): ").strip().lower()
                if command == 'q':
                    return {'interrupted': True}
            outcome = game.play_round()
            print(format_round_outcome(outcome))
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted by user")
        return {'interrupted': True}

    return {
        'winner': game.terminal.value if game.is_over else None,
        'rounds_played': game.round_number
    }


def run_simulation(num_games: int, seed: int = 0, max_rounds: int = DEFAULT_MAX_ROUNDS,
                   output: str = None) -> dict:
    """Run a batch of bot-vs-bot games and print the summary."""
    runner = SimulationRunner(max_rounds=max_rounds)
    results = runner.run_batch(num_games, base_seed=seed)
    summary = results['summary']

    print(f"Played {summary['total_games']} games")
    for name, rate in summary['win_rates'].items():
        print(f"  {name}: {summary['wins'][name]} ({rate:.1%})")
    print(f"Rounds: mean {summary['mean_rounds']:.1f}, median {summary['median_rounds']:.0f}, "
          f"max {summary['max_rounds']}")
    print(f"Wars per game: {summary['mean_wars']:.2f}, deepest war: {summary['deepest_war']} levels")

    if output:
        runner.save_results(results, output)
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play the War card game")
    parser.add_argument('--seed', type=int, default=None,
                       help='Seed for the shuffle (random if omitted)')
    parser.add_argument('--auto', action='store_true',
                       help='Play every round without waiting for input')
    parser.add_argument('--max-rounds', type=int, default=DEFAULT_MAX_ROUNDS,
                       help='Stop a game after this many rounds')
    parser.add_argument('--simulate', type=int, metavar='N', default=None,
                       help='Simulate N games instead of playing one')
    parser.add_argument('--output', type=str, default=None,
                       help='JSON file for simulation results')
    parser.add_argument('--log-file', type=str, default=None,
                       help='Also write logs to this file')
    parser.add_argument('--verbose', action='store_true',
                       help='Enable verbose logging')

    args = parser.parse_args(argv)

    if args.max_rounds <= 0:
        parser.error("--max-rounds must be positive")
    if args.simulate is not None and args.simulate <= 0:
        parser.error("--simulate must be positive")

    setup_logging(args.log_file, level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.simulate:
        run_simulation(args.simulate, args.seed or 0, args.max_rounds, args.output)
        return

    result = run_interactive_game(args.seed, args.auto, args.max_rounds)
    if not result.get('interrupted'):
        print(f"\n✅ Game completed in {result['rounds_played']} rounds")


if __name__ == "__main__":
    main()
