"""
Main game module for the War card game.
Owns the two decks and drives the Idle -> InProgress -> Resolved state machine.
"""

import random
from typing import Iterable, List, Optional
from war_game.card import Card
from war_game.deck import Deck
from war_game.round import GameSnapshot, GameState, RoundOutcome, Terminal, resolve_round
from war_game.rules import deal_alternately, validate_decks
from war_game.utils import GameLogger


class InvalidStateError(ValueError):
    """Raised when a transition is requested that the current state does not allow."""


class WarGame:
    """Game controller for War between the player and one opponent."""

    def __init__(self, rng: Optional[random.Random] = None, logger: Optional[GameLogger] = None):
        self.rng = rng if rng is not None else random.Random()
        self.logger = logger or GameLogger()
        self.player_deck = Deck()
        self.opponent_deck = Deck()
        self.state = GameState.IDLE
        self.terminal = Terminal.NONE
        self.round_number = 0
        self.total_cards = 0
        self.history: List[RoundOutcome] = []

    @classmethod
    def from_decks(cls, player_cards: Iterable[Card], opponent_cards: Iterable[Card],
                   logger: Optional[GameLogger] = None) -> 'WarGame':
        """
        Start a game from an explicit arrangement of cards, top card first.

        Raises:
            ValueError: If a side is empty or a card appears more than once
        """
        player_cards = list(player_cards)
        opponent_cards = list(opponent_cards)
        if not validate_decks(player_cards, opponent_cards):
            raise ValueError("Decks must be non-empty and must not share or repeat cards")

        game = cls(logger=logger)
        game._begin(Deck(player_cards), Deck(opponent_cards))
        return game

    def start_game(self, rng: Optional[random.Random] = None) -> GameSnapshot:
        """
        Start a new game: build a full deck, shuffle once and deal it out.

        Args:
            rng: Random source for this shuffle; defaults to the game's own

        Returns:
            Deck sizes after the deal
        """
        if rng is not None:
            self.rng = rng
        start_deck = Deck.new_shuffled(self.rng)
        player_cards, opponent_cards = deal_alternately(start_deck)
        return self._begin(Deck(player_cards), Deck(opponent_cards))

    def _begin(self, player_deck: Deck, opponent_deck: Deck) -> GameSnapshot:
        self.player_deck = player_deck
        self.opponent_deck = opponent_deck
        self.total_cards = player_deck.size() + opponent_deck.size()
        self.state = GameState.IN_PROGRESS
        self.terminal = Terminal.NONE
        self.round_number = 0
        self.history = []

        snapshot = self.snapshot()
        self.logger.log_game_start(snapshot)
        return snapshot

    def play_round(self) -> RoundOutcome:
        """
        Play the next round, including any war it triggers.

        Raises:
            InvalidStateError: If no game is in progress
        """
        if self.state != GameState.IN_PROGRESS:
            raise InvalidStateError(f"Cannot play a round while game is {self.state.value}")

        self.round_number += 1
        outcome = resolve_round(self.player_deck, self.opponent_deck, self.round_number)
        self.history.append(outcome)
        self.logger.log_round(outcome)

        if outcome.terminal != Terminal.NONE:
            self.state = GameState.RESOLVED
            self.terminal = outcome.terminal
            self.logger.log_game_end(self.terminal, self.round_number)

        return outcome

    def play_until_done(self, max_rounds: Optional[int] = None) -> List[RoundOutcome]:
        """
        Play rounds until the game resolves or max_rounds more have been played.

        Returns:
            Outcomes of the rounds played by this call
        """
        outcomes = []
        while self.state == GameState.IN_PROGRESS:
            if max_rounds is not None and len(outcomes) >= max_rounds:
                break
            outcomes.append(self.play_round())
        return outcomes

    def snapshot(self) -> GameSnapshot:
        """Current deck sizes and status."""
        return GameSnapshot(
            player_deck_size=self.player_deck.size(),
            opponent_deck_size=self.opponent_deck.size(),
            state=self.state,
            terminal=self.terminal,
        )

    @property
    def is_over(self) -> bool:
        return self.state == GameState.RESOLVED

    def get_winner(self) -> Terminal:
        """Return the terminal result; Terminal.NONE while the game runs."""
        return self.terminal
