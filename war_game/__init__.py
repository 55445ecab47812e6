"""
War card game engine.
"""

from war_game.card import Card, Outcome, Rank, Suit, compare, create_deck
from war_game.deck import Deck, EmptyDeckError
from war_game.game import InvalidStateError, WarGame
from war_game.round import GameSnapshot, GameState, RoundOutcome, Terminal, WarStep

__version__ = "0.1.0"
