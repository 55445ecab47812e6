"""
Rules module for the War card game.
Contains game constants, dealing and war-size rules, and deck validation.
"""

from typing import Iterable, List, Tuple
from war_game.card import Card, Outcome, Rank, Suit, compare
from war_game.deck import Deck


# Deck constants
NUM_RANKS = len(Rank)
NUM_SUITS = len(Suit)
TOTAL_CARDS = NUM_RANKS * NUM_SUITS
NUM_PLAYERS = 2
CARDS_PER_PLAYER = TOTAL_CARDS // NUM_PLAYERS

# War constants: cards committed per side at each escalation level
WAR_CARDS = 4


def war_draw_count(player_size: int, opponent_size: int) -> int:
    """
    Number of cards each side commits to one war level.

    The last of them is played face up; the rest go face down. A side with
    fewer than WAR_CARDS left commits everything it has.

    Args:
        player_size: Cards left in the player's deck
        opponent_size: Cards left in the opponent's deck

    Returns:
        Cards to draw from each side, 0 if either side is out
    """
    return max(0, min(player_size, opponent_size, WAR_CARDS))


def deal_alternately(deck: Deck) -> Tuple[List[Card], List[Card]]:
    """
    Deal a whole deck between two players.

    Even-indexed draws go to the opponent, odd-indexed draws to the player,
    keeping draw order within each pile.

    Returns:
        (player_cards, opponent_cards)
    """
    player_cards = []
    opponent_cards = []
    index = 0
    while not deck.is_empty():
        card = deck.draw_top()
        if index % 2 == 0:
            opponent_cards.append(card)
        else:
            player_cards.append(card)
        index += 1
    return player_cards, opponent_cards


def battle_winner_first(player_card: Card, opponent_card: Card) -> List[Card]:
    """Order two battled cards as (winner's card, loser's card)."""
    if compare(player_card, opponent_card) == Outcome.LOSE:
        return [opponent_card, player_card]
    return [player_card, opponent_card]


def validate_decks(player_cards: Iterable[Card], opponent_cards: Iterable[Card]) -> bool:
    """
    Check that two piles form a legal arrangement.

    Returns:
        True if both piles are non-empty, no card appears twice across them,
        and together they hold no more than a full deck
    """
    player_cards = list(player_cards)
    opponent_cards = list(opponent_cards)
    if not player_cards or not opponent_cards:
        return False
    combined = player_cards + opponent_cards
    if len(combined) > TOTAL_CARDS:
        return False
    return len(set(combined)) == len(combined)
