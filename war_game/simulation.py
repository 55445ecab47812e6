"""
Simulation system for the War card game.
Runs seeded self-play batches and measures shuffle uniformity.
"""

import random
import time
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from war_game.card import create_deck
from war_game.deck import Deck
from war_game.game import WarGame
from war_game.round import Terminal
from war_game.rules import TOTAL_CARDS
from war_game.utils import GameLogger, save_game_log

STALEMATE = "STALEMATE"
DEFAULT_MAX_ROUNDS = 10000


class SimulationRunner:
    """Plays many seeded games and summarizes how they went."""

    def __init__(self, max_rounds: int = DEFAULT_MAX_ROUNDS):
        self.max_rounds = max_rounds
        self.logger = GameLogger()
        self.results: List[Dict[str, Any]] = []

    def run_single_game(self, seed: Optional[int] = None, verbose: bool = False) -> Dict[str, Any]:
        """Run a single game to completion or until the round cap."""
        game = WarGame(rng=random.Random(seed), logger=self.logger)
        game.start_game()

        start_time = time.time()
        outcomes = game.play_until_done(self.max_rounds)
        game_duration = time.time() - start_time

        wars = [o for o in outcomes if o.is_war]
        winner = game.terminal.value if game.is_over else STALEMATE

        result = {
            'timestamp': datetime.now().isoformat(),
            'seed': seed,
            'winner': winner,
            'rounds_played': game.round_number,
            'wars': len(wars),
            'deepest_war': max((len(o.war_steps) for o in wars), default=0),
            'final_sizes': [game.player_deck.size(), game.opponent_deck.size()],
            'duration_seconds': game_duration,
            'success': True
        }

        if verbose:
            self.logger.logger.info(f"Game {seed}: {winner} after {game.round_number} rounds")

        return result

    def run_batch(self, num_games: int, base_seed: int = 0) -> Dict[str, Any]:
        """
        Run a batch of games with consecutive seeds.

        Args:
            num_games: Number of games to play
            base_seed: Seed of the first game

        Returns:
            Dictionary with per-game results and a summary
        """
        if num_games <= 0:
            raise ValueError(f"num_games must be positive, got {num_games}")

        self.logger.logger.info(f"Starting simulation: {num_games} games, seeds {base_seed}.."
                                f"{base_seed + num_games - 1}")

        games = []
        for game_num in range(num_games):
            games.append(self.run_single_game(base_seed + game_num))
            if (game_num + 1) % 100 == 0:
                self.logger.logger.info(f"Progress: {game_num + 1}/{num_games} games")

        self.results.extend(games)
        summary = summarize_results(games)
        self.logger.logger.info(f"Simulation complete! Win rates: {summary['win_rates']}")

        return {
            'start_time': games[0]['timestamp'],
            'num_games': num_games,
            'base_seed': base_seed,
            'max_rounds': self.max_rounds,
            'games': games,
            'summary': summary
        }

    def save_results(self, results: Dict[str, Any], filename: str = None) -> str:
        """Save simulation results to JSON."""
        filename = save_game_log(results, filename)
        self.logger.logger.info(f"Results saved to {filename}")
        return filename


def summarize_results(games: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Aggregate win counts and round statistics for a list of game results."""
    outcomes = [t.value for t in Terminal if t != Terminal.NONE] + [STALEMATE]
    wins = {name: sum(1 for g in games if g['winner'] == name) for name in outcomes}
    total = len(games)

    rounds = np.array([g['rounds_played'] for g in games], dtype=np.int64)
    wars = np.array([g['wars'] for g in games], dtype=np.int64)

    return {
        'total_games': total,
        'wins': wins,
        'win_rates': {name: count / total for name, count in wins.items()},
        'mean_rounds': float(rounds.mean()),
        'median_rounds': float(np.median(rounds)),
        'max_rounds': int(rounds.max()),
        'mean_wars': float(wars.mean()),
        'deepest_war': max(g['deepest_war'] for g in games),
    }


def shuffle_position_counts(trials: int, seed: int = 0) -> np.ndarray:
    """
    Count where each card lands over many seeded shuffles.

    Returns:
        TOTAL_CARDS x TOTAL_CARDS matrix; entry [position, card_index] is how
        often the card with canonical index card_index ended at position
    """
    rng = random.Random(seed)
    card_index = {card: i for i, card in enumerate(create_deck())}
    counts = np.zeros((TOTAL_CARDS, TOTAL_CARDS), dtype=np.int64)

    for _ in range(trials):
        deck = Deck.new_shuffled(rng)
        for position, card in enumerate(deck.cards):
            counts[position, card_index[card]] += 1
    return counts


def chi_square_uniformity(counts: np.ndarray) -> Tuple[float, int]:
    """
    Pearson chi-square statistic of position counts against a uniform spread.

    Each row is one position; under a fair shuffle every card is equally
    likely there.

    Returns:
        (statistic summed over rows, degrees of freedom)
    """
    counts = np.asarray(counts, dtype=np.float64)
    rows, cols = counts.shape
    expected = counts.sum(axis=1, keepdims=True) / cols
    statistic = float(((counts - expected) ** 2 / expected).sum())
    return statistic, rows * (cols - 1)
