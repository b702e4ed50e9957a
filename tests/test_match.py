import pytest

from match import MatchState, PLAYER, COMPUTER


def test_fresh_state_is_stopped():
    m = MatchState()
    assert m.game_over
    assert not m.round_active
    assert m.check_win() is None


def test_new_game_zeroes_scores_and_keeps_latches():
    m = MatchState(bot_speed=6, player_score=7, computer_score=2, player_moved=True, paddle_contact=True)
    m.winner = PLAYER
    m.new_game(3)
    assert (m.player_score, m.computer_score) == (0, 0)
    assert m.bot_speed == 3
    assert m.winner is None
    assert m.round_active and not m.game_over
    assert m.player_moved and m.paddle_contact


def test_award():
    m = MatchState()
    m.award(PLAYER)
    m.award(COMPUTER)
    m.award(COMPUTER)
    assert (m.player_score, m.computer_score) == (1, 2)
    with pytest.raises(ValueError):
        m.award("REF")


def test_player_reaching_threshold_wins():
    m = MatchState()
    m.new_game(3)
    m.player_score = 6
    assert m.check_win() is None
    m.award(PLAYER)
    assert m.check_win() == PLAYER
    assert m.game_over and not m.round_active
    assert m.winner_name == "Player"


def test_computer_wins():
    m = MatchState(win_score=3)
    m.new_game(3)
    for _ in range(3):
        m.award(COMPUTER)
    assert m.check_win() == COMPUTER
    assert m.winner_name == "Computer"


def test_win_needs_exact_threshold():
    m = MatchState()
    m.new_game(3)
    m.player_score = 8
    assert m.check_win() is None
