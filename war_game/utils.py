"""
Utility module for the War card game.
Contains logging, formatting, and game log persistence helpers.
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
from war_game.card import Card, Outcome
from war_game.round import GameSnapshot, RoundOutcome, Terminal, WarStep


def setup_logging(log_file: Optional[str] = None, level: int = logging.INFO):
    """Set up logging configuration for the game."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def format_cards(cards: List[Card]) -> str:
    """Format a list of cards for display."""
    if not cards:
        return "none"
    return ' '.join(str(card) for card in cards)


def format_snapshot(snapshot: GameSnapshot) -> str:
    """Format deck sizes for display."""
    return f"You: {snapshot.player_deck_size} cards | Opponent: {snapshot.opponent_deck_size} cards"


def format_round_outcome(outcome: RoundOutcome) -> str:
    """
    Format a round outcome as the lines a text front end prints.

    Args:
        outcome: Result of WarGame.play_round()

    Returns:
        Multi-line description of the round
    """
    lines = [f"Round {outcome.round_number}: You {outcome.player_card} vs Opponent {outcome.opponent_card}"]

    for step in outcome.war_steps:
        face_down = len(step.face_down)
        lines.append(f"  WAR {step.level}: {face_down} down each, "
                     f"You {step.player_card} vs Opponent {step.opponent_card}")

    if outcome.terminal == Terminal.DRAW:
        lines.append("Both decks ran out during the war!")
    elif outcome.winner == Outcome.WIN:
        lines.append(f"You won this one! (+{outcome.cards_won} cards)")
    else:
        lines.append(f"You lost this one! (opponent takes {outcome.cards_won} cards)")

    lines.append(f"You: {outcome.player_deck_size} cards | Opponent: {outcome.opponent_deck_size} cards")

    if outcome.terminal == Terminal.PLAYER_WINS:
        lines.append("You Won!")
    elif outcome.terminal == Terminal.OPPONENT_WINS:
        lines.append("You Lost!")
    elif outcome.terminal == Terminal.DRAW:
        lines.append("It's a draw!")
    return '\n'.join(lines)


def save_game_log(game_data: Dict[str, Any], filename: str = None) -> str:
    """Save complete game data to JSON file."""
    if filename is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"war_log_{timestamp}.json"

    with open(filename, 'w') as f:
        json.dump(game_data, f, indent=2, default=str)
    return filename


def load_game_log(filename: str) -> Dict[str, Any]:
    """Load game data from JSON file."""
    with open(filename, 'r') as f:
        return json.load(f)


class GameLogger:
    """Logging wrapper for game events."""

    def __init__(self, log_file: Optional[str] = None):
        self.logger = logging.getLogger("WarGame")

        if log_file:
            fh = logging.FileHandler(log_file)
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            self.logger.addHandler(fh)

    def log_game_start(self, snapshot: GameSnapshot):
        """Log the start of a new game."""
        self.logger.info("=== NEW GAME STARTED ===")
        self.logger.info(format_snapshot(snapshot))

    def log_round(self, outcome: RoundOutcome):
        """Log a resolved round."""
        self.logger.debug(f"Round {outcome.round_number}: {outcome.player_card} vs "
                          f"{outcome.opponent_card} -> {outcome.result.value}")
        for step in outcome.war_steps:
            self.log_war_step(outcome.round_number, step)
        self.logger.debug(f"Round {outcome.round_number} winner: {outcome.winner.value}, "
                          f"{outcome.cards_won} cards, sizes "
                          f"{outcome.player_deck_size}/{outcome.opponent_deck_size}")

    def log_war_step(self, round_number: int, step: WarStep):
        """Log one war escalation level."""
        self.logger.debug(f"Round {round_number} war level {step.level}: "
                          f"{len(step.face_down)} face down, "
                          f"{step.player_card} vs {step.opponent_card} -> {step.result.value}")

    def log_game_end(self, terminal: Terminal, rounds_played: int):
        """Log game completion."""
        self.logger.info("=== GAME COMPLETE ===")
        self.logger.info(f"Result: {terminal.value} after {rounds_played} rounds")
