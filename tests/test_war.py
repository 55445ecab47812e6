"""
Tests for war escalation on tied cards.
Decks are arranged by hand so every war plays out the same way.
"""

import pytest

from war_game.card import Outcome
from war_game.deck import Deck
from war_game.game import InvalidStateError, WarGame
from war_game.round import GameState, Terminal, WarPool, resolve_war


class TestWar:
    """Test war resolution."""

    def test_single_war_opponent_takes_pool(self, make_cards):
        game = WarGame.from_decks(make_cards("KH 4H 5H 6H 2H 9H"),
                                  make_cards("KS 4S 5S 6S 3S 9S"))
        outcome = game.play_round()

        assert outcome.result == Outcome.TIE
        assert outcome.winner == Outcome.LOSE
        assert outcome.cards_won == 10
        assert outcome.war_cards == [tuple(make_cards("2H 3S"))]
        assert len(outcome.war_steps[0].face_down) == 3
        assert outcome.terminal == Terminal.NONE

        assert game.player_deck.cards == tuple(make_cards("9H"))
        assert game.opponent_deck.cards == tuple(make_cards("9S KH KS 4H 4S 5H 5S 6H 6S 3S 2H"))

    def test_single_war_player_takes_pool(self, make_cards):
        game = WarGame.from_decks(make_cards("8H 2H 3H 4H QH 5H"),
                                  make_cards("8S 2S 3S 4S JS 5S"))
        outcome = game.play_round()

        assert outcome.winner == Outcome.WIN
        assert outcome.cards_won == 10
        assert game.player_deck.size() == 11
        assert game.opponent_deck.size() == 1

    def test_double_war(self, make_cards):
        game = WarGame.from_decks(make_cards("5H 2H 3H 4H QH 6H 7H 8H KH"),
                                  make_cards("5S 2S 3S 4S QS 6S 7S 8S AS"))
        outcome = game.play_round()

        assert [step.result for step in outcome.war_steps] == [Outcome.TIE, Outcome.LOSE]
        assert outcome.war_cards == [tuple(make_cards("QH QS")), tuple(make_cards("KH AS"))]
        assert outcome.cards_won == 18
        assert outcome.terminal == Terminal.OPPONENT_WINS
        assert game.opponent_deck.size() == 18
        assert game.state == GameState.RESOLVED

    def test_short_side_commits_remaining_cards_and_loses(self, make_cards):
        game = WarGame.from_decks(make_cards("7H 8H 9H 2H"),
                                  make_cards("7S 8S 9S AS 5S 6S"))
        outcome = game.play_round()

        step = outcome.war_steps[0]
        assert len(step.face_down) == 2
        assert outcome.terminal == Terminal.OPPONENT_WINS
        assert game.player_deck.is_empty()
        # Opponent only committed as many cards as the short side had.
        assert game.opponent_deck.cards[:2] == tuple(make_cards("5S 6S"))
        assert game.opponent_deck.size() == 10

    def test_short_side_runs_out_on_repeated_tie(self, make_cards):
        game = WarGame.from_decks(make_cards("7H 8H 9H AH"),
                                  make_cards("7S 8S 9S AS 5S"))
        outcome = game.play_round()

        assert len(outcome.war_steps) == 1
        assert outcome.war_steps[0].result == Outcome.TIE
        assert outcome.winner == Outcome.LOSE
        assert outcome.terminal == Terminal.OPPONENT_WINS
        assert game.opponent_deck.size() == 9

        with pytest.raises(InvalidStateError):
            game.play_round()

    def test_short_side_can_still_win_the_level(self, make_cards):
        game = WarGame.from_decks(make_cards("7H 8H 9H AH"),
                                  make_cards("7S 8S 9S 2S 5S"))
        outcome = game.play_round()

        assert outcome.winner == Outcome.WIN
        assert outcome.terminal == Terminal.NONE
        assert game.player_deck.size() == 8
        assert game.opponent_deck.size() == 1

    def test_tie_on_last_card(self, make_cards):
        game = WarGame.from_decks(make_cards("7H"), make_cards("7S 2S"))
        outcome = game.play_round()

        assert outcome.result == Outcome.TIE
        assert outcome.war_steps == ()
        assert outcome.winner == Outcome.LOSE
        assert outcome.terminal == Terminal.OPPONENT_WINS
        assert game.opponent_deck.cards == tuple(make_cards("2S 7H 7S"))

    def test_both_sides_run_out_together(self, make_cards):
        game = WarGame.from_decks(make_cards("5H QH"), make_cards("5S QS"))
        outcome = game.play_round()

        assert outcome.winner == Outcome.TIE
        assert outcome.terminal == Terminal.DRAW
        assert outcome.cards_won == 0
        assert game.state == GameState.RESOLVED
        assert game.player_deck.cards == tuple(make_cards("5H QH"))
        assert game.opponent_deck.cards == tuple(make_cards("5S QS"))

    def test_war_never_draws_from_empty_deck(self, make_cards):
        # Second level: the short side commits only the two cards it has left.
        player = Deck(make_cards("2H 3H 4H 5H 6H 7H"))
        opponent = Deck(make_cards("2S 3S 4S 5S 6S KS 8S 9S"))
        pool = WarPool(*make_cards("JH JS"))

        winner, steps, is_draw = resolve_war(player, opponent, pool)

        assert winner == Outcome.LOSE
        assert not is_draw
        assert player.is_empty()
        assert [step.result for step in steps] == [Outcome.TIE, Outcome.LOSE]
        assert [len(step.face_down) for step in steps] == [3, 1]
        assert opponent.size() == 16

    def test_repeated_ties_until_both_exhausted(self, make_cards):
        player = Deck(make_cards("2H 3H 4H 5H 6H 7H 8H 9H"))
        opponent = Deck(make_cards("2S 3S 4S 5S 6S 7S 8S 9S"))
        pool = WarPool(*make_cards("JH JS"))

        winner, steps, is_draw = resolve_war(player, opponent, pool)

        # 4 + 4 cards tie at 5 and 9, then both decks are empty.
        assert [len(step.face_down) for step in steps] == [3, 3]
        assert is_draw
        assert winner == Outcome.TIE
        assert player.size() == 9
        assert opponent.size() == 9
