"""
Round module for the War card game.
Resolves a single round, including war escalation on tied cards,
and defines the outcome records reported back to callers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple
from war_game.card import Card, Outcome, compare
from war_game.deck import Deck
from war_game.rules import battle_winner_first, war_draw_count


class GameState(Enum):
    """Lifecycle of a game."""
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


class Terminal(Enum):
    """Final result of a game, or NONE while it is still running."""
    NONE = "none"
    PLAYER_WINS = "player_wins"
    OPPONENT_WINS = "opponent_wins"
    DRAW = "draw"


@dataclass(frozen=True)
class WarStep:
    """One escalation level of a war."""

    level: int
    face_down: Tuple[Tuple[Card, Card], ...]
    player_card: Card
    opponent_card: Card
    result: Outcome


@dataclass(frozen=True)
class GameSnapshot:
    """Deck sizes and status reported to the presentation layer."""

    player_deck_size: int
    opponent_deck_size: int
    state: GameState = GameState.IN_PROGRESS
    terminal: Terminal = Terminal.NONE


@dataclass(frozen=True)
class RoundOutcome:
    """Everything that happened in one round, from the player's side."""

    round_number: int
    player_card: Card
    opponent_card: Card
    result: Outcome
    winner: Outcome
    cards_won: int
    terminal: Terminal
    player_deck_size: int
    opponent_deck_size: int
    war_steps: Tuple[WarStep, ...] = field(default_factory=tuple)

    @property
    def war_cards(self) -> List[Tuple[Card, Card]]:
        """Face-up (player_card, opponent_card) pairs revealed during war."""
        return [(step.player_card, step.opponent_card) for step in self.war_steps]

    @property
    def is_war(self) -> bool:
        return self.result == Outcome.TIE

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation."""
        return {
            'round_number': self.round_number,
            'player_card': str(self.player_card),
            'opponent_card': str(self.opponent_card),
            'result': self.result.value,
            'winner': self.winner.value,
            'cards_won': self.cards_won,
            'war_cards': [[str(p), str(o)] for p, o in self.war_cards],
            'terminal': self.terminal.value,
            'player_deck_size': self.player_deck_size,
            'opponent_deck_size': self.opponent_deck_size,
        }


class WarPool:
    """Cards at stake in a war, kept in the order they were committed."""

    def __init__(self, player_card: Card, opponent_card: Card):
        self.cards: List[Card] = [player_card, opponent_card]
        self.player_cards: List[Card] = [player_card]
        self.opponent_cards: List[Card] = [opponent_card]

    def add_face_down(self, player_card: Card, opponent_card: Card):
        self.cards.extend([player_card, opponent_card])
        self.player_cards.append(player_card)
        self.opponent_cards.append(opponent_card)

    def add_face_up(self, player_card: Card, opponent_card: Card):
        # Face-up cards join the pool opponent first.
        self.cards.extend([opponent_card, player_card])
        self.player_cards.append(player_card)
        self.opponent_cards.append(opponent_card)

    def award(self, deck: Deck):
        """Move every card in the pool to the bottom of the winner's deck."""
        deck.extend_bottom(self.cards)

    def return_to_owners(self, player_deck: Deck, opponent_deck: Deck):
        """Give each side back the cards it committed."""
        player_deck.extend_bottom(self.player_cards)
        opponent_deck.extend_bottom(self.opponent_cards)

    def __len__(self):
        return len(self.cards)


def determine_terminal(player_deck: Deck, opponent_deck: Deck) -> Terminal:
    """Terminal result implied by deck sizes alone."""
    if opponent_deck.is_empty():
        return Terminal.PLAYER_WINS
    if player_deck.is_empty():
        return Terminal.OPPONENT_WINS
    return Terminal.NONE


def resolve_war(player_deck: Deck, opponent_deck: Deck,
                pool: WarPool) -> Tuple[Outcome, List[WarStep], bool]:
    """
    Escalate a tie until a face-up comparison decides it or a side runs out.

    Each level both sides commit war_draw_count() cards: all but the last go
    face down, the last is compared face up. Sizes are checked before every
    level, so no draw is attempted on an empty deck.

    Args:
        player_deck: Player's deck, drawn from and possibly awarded the pool
        opponent_deck: Opponent's deck
        pool: Cards already at stake (the two tied cards)

    Returns:
        (winner, steps, is_draw) where winner is the player's final outcome
        and is_draw marks both decks running out together
    """
    steps: List[WarStep] = []
    # Every level consumes at least one card per side.
    max_levels = (len(pool) + player_deck.size() + opponent_deck.size()) // 2 + 1

    for level in range(1, max_levels + 1):
        to_draw = war_draw_count(player_deck.size(), opponent_deck.size())
        if to_draw == 0:
            if player_deck.is_empty() and opponent_deck.is_empty():
                pool.return_to_owners(player_deck, opponent_deck)
                return Outcome.TIE, steps, True
            if player_deck.is_empty():
                pool.award(opponent_deck)
                return Outcome.LOSE, steps, False
            pool.award(player_deck)
            return Outcome.WIN, steps, False

        face_down = []
        for _ in range(to_draw - 1):
            player_card = player_deck.draw_top()
            opponent_card = opponent_deck.draw_top()
            pool.add_face_down(player_card, opponent_card)
            face_down.append((player_card, opponent_card))

        opponent_card = opponent_deck.draw_top()
        player_card = player_deck.draw_top()
        pool.add_face_up(player_card, opponent_card)

        result = compare(player_card, opponent_card)
        steps.append(WarStep(level, tuple(face_down), player_card, opponent_card, result))

        if result == Outcome.WIN:
            pool.award(player_deck)
            return Outcome.WIN, steps, False
        if result == Outcome.LOSE:
            pool.award(opponent_deck)
            return Outcome.LOSE, steps, False

    raise RuntimeError(f"War did not terminate within {max_levels} levels")


def resolve_round(player_deck: Deck, opponent_deck: Deck,
                  round_number: int = 0) -> RoundOutcome:
    """
    Play one round: draw a card from each deck, compare, settle.

    The higher card's owner takes both cards, winner's card first. A tie
    starts a war (see resolve_war).

    Raises:
        EmptyDeckError: If either deck is empty on entry
    """
    player_card = player_deck.draw_top()
    opponent_card = opponent_deck.draw_top()
    result = compare(player_card, opponent_card)

    steps: List[WarStep] = []
    is_draw = False
    if result == Outcome.TIE:
        pool = WarPool(player_card, opponent_card)
        winner, steps, is_draw = resolve_war(player_deck, opponent_deck, pool)
        cards_won = 0 if is_draw else len(pool)
    else:
        winner = result
        winnings = battle_winner_first(player_card, opponent_card)
        target = player_deck if result == Outcome.WIN else opponent_deck
        target.extend_bottom(winnings)
        cards_won = len(winnings)

    terminal = Terminal.DRAW if is_draw else determine_terminal(player_deck, opponent_deck)

    return RoundOutcome(
        round_number=round_number,
        player_card=player_card,
        opponent_card=opponent_card,
        result=result,
        winner=winner,
        cards_won=cards_won,
        terminal=terminal,
        player_deck_size=player_deck.size(),
        opponent_deck_size=opponent_deck.size(),
        war_steps=tuple(steps),
    )
