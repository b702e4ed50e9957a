import pytest

from config import Settings
from core import make_ball, make_paddles
from match import MatchState


@pytest.fixture
def cfg():
    return Settings()


@pytest.fixture
def match(cfg):
    m = MatchState(win_score=cfg.win_score, bot_speed=cfg.bot_speed)
    m.new_game(cfg.bot_speed)
    return m


@pytest.fixture
def ball(cfg):
    return make_ball(cfg)


@pytest.fixture
def paddles(cfg):
    return make_paddles(cfg)
