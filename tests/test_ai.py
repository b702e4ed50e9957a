import pytest

from ai import BotAI, max_paddle_shift
from core import Ball


@pytest.mark.parametrize("score, expected", [(0, 3), (1, 3), (2, 4), (5, 5), (8, 7)])
def test_max_shift_steps_with_bot_score(score, expected):
    assert max_paddle_shift(3, score, 2) == expected


def test_idle_until_player_moves(cfg, match, paddles):
    _, bot = paddles
    ai = BotAI(cfg)
    ai.update(bot, Ball(480, 300), match)
    assert bot.x == 225


def test_capped_by_score(cfg, match, paddles):
    _, bot = paddles
    match.player_moved = True
    match.computer_score = 8
    ai = BotAI(cfg)
    assert ai.max_shift(match) == 7
    ai.update(bot, Ball(400, 300), match)
    assert bot.x == 232


def test_escalated_speed_raises_cap(cfg, match, paddles):
    _, bot = paddles
    match.player_moved = True
    match.bot_speed = cfg.bot_speed_escalated
    ai = BotAI(cfg)
    ai.update(bot, Ball(0, 300), match)
    assert bot.x == 219


def test_small_gap_closes_exactly(cfg, match, paddles):
    _, bot = paddles
    match.player_moved = True
    ai = BotAI(cfg)
    ai.update(bot, Ball(276, 300), match)
    assert bot.x == 226
    ai.update(bot, Ball(276, 300), match)
    assert bot.x == 226


def test_aims_left_of_the_ball(cfg, match, paddles):
    _, bot = paddles
    match.player_moved = True
    ai = BotAI(cfg)
    ball = Ball(300, 300)
    for _ in range(100):
        ai.update(bot, ball, match)
    assert bot.center == ball.x - cfg.paddle_reach


def test_stays_on_the_field(cfg, match, paddles):
    _, bot = paddles
    match.player_moved = True
    ai = BotAI(cfg)
    for _ in range(200):
        ai.update(bot, Ball(900, 300), match)
        assert 0 <= bot.x <= cfg.width - cfg.paddle_w
    assert bot.x == 450
    for _ in range(200):
        ai.update(bot, Ball(-400, 300), match)
        assert 0 <= bot.x <= cfg.width - cfg.paddle_w
    assert bot.x == 0
