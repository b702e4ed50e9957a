import logging
from dataclasses import dataclass

from config import Settings
from match import MatchState, PLAYER, COMPUTER

logger = logging.getLogger(__name__)

@dataclass
class Ball:
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    r: float = 5.0

@dataclass
class Paddle:
    x: float
    y: float
    w: float
    h: float
    max_x: float

    @property
    def center(self):
        return self.x + self.w / 2

    @property
    def right(self):
        return self.x + self.w

    def overlaps(self, x):
        return self.x < x < self.right

    def move_to(self, x):
        self.x = clamp(x, 0.0, self.max_x)

    def shift(self, dx):
        self.move_to(self.x + dx)

def clamp(v, a, b):
    return max(a, min(b, v))

def make_ball(cfg: Settings):
    ball = Ball(cfg.width / 2, cfg.height / 2, vx=cfg.initial_speed_x, r=cfg.ball_r)
    reset_ball(ball, cfg)
    return ball

def make_paddles(cfg: Settings):
    start_x = (cfg.width - cfg.paddle_w) / 2
    player = Paddle(start_x, cfg.height - cfg.player_paddle_offset, cfg.paddle_w, cfg.paddle_h, cfg.paddle_max_x)
    bot = Paddle(start_x, cfg.bot_paddle_offset, cfg.paddle_w, cfg.paddle_h, cfg.paddle_max_x)
    return player, bot

def reset_ball(ball: Ball, cfg: Settings):
    # vx is left alone, the next player hit sets it
    ball.x = cfg.width / 2
    ball.y = cfg.height / 2
    ball.vy = cfg.initial_speed_y

def advance_ball(ball: Ball, player_moved, paddle_contact):
    ball.y += -ball.vy
    if player_moved and paddle_contact:
        ball.x += ball.vx

def wall_collide_ball(ball: Ball, width):
    if ball.x < 0 and ball.vx < 0:
        ball.vx = -ball.vx
        return True
    if ball.x > width and ball.vx > 0:
        ball.vx = -ball.vx
        return True
    return False

def speed_up_on_hit(ball: Ball, match: MatchState, cfg: Settings, top=False):
    if not match.player_moved:
        return
    if top:
        ball.vy = min(ball.vy + 1, cfg.max_speed_y)
        return
    ball.vy -= 1
    if ball.vy < cfg.min_speed_y:
        ball.vy = cfg.min_speed_y
        if match.bot_speed != cfg.bot_speed_escalated:
            logger.debug("rally at top speed, bot speed %s -> %s", match.bot_speed, cfg.bot_speed_escalated)
        match.bot_speed = cfg.bot_speed_escalated

def player_paddle_collide(ball: Ball, paddle: Paddle, match: MatchState, cfg: Settings):
    """Bottom paddle. Returns COMPUTER when the ball got past it."""
    if ball.y <= cfg.height - cfg.paddle_reach:
        return None
    if paddle.overlaps(ball.x):
        match.paddle_contact = True
        speed_up_on_hit(ball, match, cfg)
        ball.vy = -ball.vy
        ball.vx = (ball.x - paddle.center) * cfg.bounce_coef
    elif ball.y > cfg.height:
        reset_ball(ball, cfg)
        match.award(COMPUTER)
        return COMPUTER
    return None

def bot_paddle_collide(ball: Ball, paddle: Paddle, match: MatchState, cfg: Settings):
    """Top paddle. Returns PLAYER when the ball got past it.

    Unlike the bottom paddle this one never redirects vx.
    """
    if ball.y >= cfg.paddle_reach:
        return None
    if paddle.overlaps(ball.x):
        speed_up_on_hit(ball, match, cfg, top=True)
        ball.vy = -ball.vy
    elif ball.y < 0:
        reset_ball(ball, cfg)
        match.award(PLAYER)
        return PLAYER
    return None

def resolve_collisions(ball: Ball, player: Paddle, bot: Paddle, match: MatchState, cfg: Settings):
    wall_collide_ball(ball, cfg.width)
    scored = player_paddle_collide(ball, player, match, cfg)
    return bot_paddle_collide(ball, bot, match, cfg) or scored
