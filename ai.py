from config import Settings
from core import Ball, Paddle, clamp
from match import MatchState

def max_paddle_shift(base, score, divisor):
    return base + score // divisor

class BotAI:
    """Rate-limited tracker for the top paddle.

    Chases the ball's current x (not its landing point). The per-tick cap
    grows by one every ``score_divisor`` points the bot scores.
    """

    def __init__(self, cfg: Settings):
        self.cfg = cfg

    def max_shift(self, match: MatchState):
        return max_paddle_shift(match.bot_speed, match.computer_score, self.cfg.score_divisor)

    def update(self, bot: Paddle, ball: Ball, match: MatchState):
        if not match.player_moved:
            return
        limit = self.max_shift(match)
        target = ball.x - self.cfg.paddle_reach
        delta = target - bot.center
        bot.shift(clamp(delta, -limit, limit))
