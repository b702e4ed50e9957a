import logging
import math
from dataclasses import dataclass

from ai import BotAI
from config import Settings
from core import make_ball, make_paddles, reset_ball, advance_ball, resolve_collisions
from match import MatchState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    ball_x: float
    ball_y: float
    player_x: float
    bot_x: float
    player_score: int
    computer_score: int


class PointerInput:
    """Latest pointer x in screen space.

    Written by the host's event pump, read once at the start of a tick. Only
    the last value between two ticks survives.
    """

    def __init__(self):
        self._x = None

    def push(self, screen_x):
        try:
            x = float(screen_x)
        except (TypeError, ValueError):
            logger.debug("dropping pointer input %r", screen_x)
            return
        if math.isnan(x):
            logger.debug("dropping NaN pointer input")
            return
        self._x = x

    def sample(self):
        x, self._x = self._x, None
        return x


def _ignore_frame(snapshot):
    pass


class GameLoop:
    """One match: owns the ball, both paddles, scores and the bot.

    Stopped until ``start()``; each ``tick()`` renders, moves, collides,
    updates the bot and checks for a winner, in that order.
    """

    def __init__(self, cfg: Settings = None, render=None, on_game_over=None):
        self.cfg = cfg or Settings()
        self.render = render or _ignore_frame
        self.on_game_over = on_game_over
        self.ball = make_ball(self.cfg)
        self.player, self.bot = make_paddles(self.cfg)
        self.match = MatchState(win_score=self.cfg.win_score, bot_speed=self.cfg.bot_speed)
        self.ai = BotAI(self.cfg)
        self.pointer = PointerInput()
        self.games = 0

    @property
    def running(self):
        return not self.match.game_over

    def snapshot(self):
        return Snapshot(
            self.ball.x, self.ball.y,
            self.player.x, self.bot.x,
            self.match.player_score, self.match.computer_score,
        )

    def start(self):
        # paddles keep their positions from the previous game
        self.match.new_game(self.cfg.bot_speed)
        self.ball.vx = self.cfg.initial_speed_x
        reset_ball(self.ball, self.cfg)
        self.games += 1
        logger.info("game %d started, first to %d", self.games, self.cfg.win_score)
        self.render(self.snapshot())

    def restart(self):
        if self.running:
            logger.debug("restart ignored, game still running")
            return False
        self.start()
        return True

    def apply_pointer(self):
        screen_x = self.pointer.sample()
        if screen_x is None:
            return
        self.match.player_moved = True
        self.player.move_to(screen_x - self.cfg.canvas_offset - self.cfg.paddle_reach)

    def tick(self):
        if not self.running:
            return False
        self.apply_pointer()
        self.render(self.snapshot())
        advance_ball(self.ball, self.match.player_moved, self.match.paddle_contact)
        resolve_collisions(self.ball, self.player, self.bot, self.match, self.cfg)
        self.ai.update(self.bot, self.ball, self.match)
        winner = self.match.check_win()
        if winner is None:
            return True
        name = self.match.winner_name
        logger.info("game over, %s wins %d:%d", name, self.match.player_score, self.match.computer_score)
        if self.on_game_over:
            self.on_game_over(name)
        return False

    def run(self, next_frame, max_ticks=None):
        """Tick until the game ends or the host stops it.

        ``next_frame()`` runs between ticks; returning False stops the loop.
        Returns the number of ticks run.
        """
        n = 0
        while self.running:
            more = self.tick()
            n += 1
            if not more:
                break
            if max_ticks is not None and n >= max_ticks:
                break
            if not next_frame():
                break
        return n
