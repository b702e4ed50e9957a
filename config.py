from dataclasses import dataclass, replace

W, H = 500, 700

BG = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)

BUTTON_LABEL = (200, 200, 200)
BUTTON_FILL = (255, 255, 255, 26)
BUTTON_FILL_ACTIVE = (255, 255, 255, 70)
BUTTON_RADIUS = 12

PADDLE_W = 50
PADDLE_H = 10
PADDLE_REACH = 25
PLAYER_PADDLE_OFFSET = 20
BOT_PADDLE_OFFSET = 10

BALL_R = 5

INITIAL_SPEED_Y = -3
MAX_SPEED_Y = 5
MIN_SPEED_Y = -5
BOUNCE_COEF = 0.3

BOT_SPEED_ESCALATED = 6
BOT_SCORE_DIVISOR = 2

WIN_SCORE = 7

CENTER_LINE_DASH = 4
SCORE_FONT = ("courier new", 32)
FPS = 60

MOBILE_MAX_WIDTH = 600

# bot_speed is the base of the bot's per-tick cap: bot_speed + score // score_divisor.
# Mobile starts the cap one step higher; the rally escalation replaces it for both.
PROFILES = {
    "desktop": {"initial_speed_x": -1, "bot_speed": 3},
    "mobile":  {"initial_speed_x": -2, "bot_speed": 4},
}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    width: float = W
    height: float = H
    paddle_w: float = PADDLE_W
    paddle_h: float = PADDLE_H
    paddle_reach: float = PADDLE_REACH
    player_paddle_offset: float = PLAYER_PADDLE_OFFSET
    bot_paddle_offset: float = BOT_PADDLE_OFFSET
    ball_r: float = BALL_R
    initial_speed_x: float = PROFILES["desktop"]["initial_speed_x"]
    initial_speed_y: float = INITIAL_SPEED_Y
    min_speed_y: float = MIN_SPEED_Y
    max_speed_y: float = MAX_SPEED_Y
    bounce_coef: float = BOUNCE_COEF
    bot_speed: float = PROFILES["desktop"]["bot_speed"]
    bot_speed_escalated: float = BOT_SPEED_ESCALATED
    score_divisor: int = BOT_SCORE_DIVISOR
    win_score: int = WIN_SCORE
    canvas_offset: float = 0
    fps: int = FPS

    def __post_init__(self):
        self.validate()

    @classmethod
    def for_profile(cls, name="desktop", **overrides):
        if name not in PROFILES:
            raise ConfigError(f"unknown profile {name!r}, expected one of {sorted(PROFILES)}")
        values = dict(PROFILES[name])
        values.update(overrides)
        return cls(**values)

    def with_overrides(self, **overrides):
        return replace(self, **overrides)

    @property
    def paddle_max_x(self):
        return self.width - self.paddle_w

    def validate(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"field must have positive size, got {self.width}x{self.height}")
        if self.paddle_w <= 0 or self.paddle_w > self.width:
            raise ConfigError(f"paddle width {self.paddle_w} does not fit a field of width {self.width}")
        if self.paddle_h <= 0:
            raise ConfigError("paddle height must be positive")
        if self.paddle_reach <= 0 or self.paddle_reach * 2 >= self.height:
            raise ConfigError(f"paddle reach {self.paddle_reach} does not fit a field of height {self.height}")
        if self.ball_r <= 0:
            raise ConfigError("ball radius must be positive")
        if self.max_speed_y <= 0 or self.min_speed_y != -self.max_speed_y:
            # vy is clamped before the paddle flip
            raise ConfigError(f"speed bounds must be symmetric around 0, got [{self.min_speed_y}, {self.max_speed_y}]")
        if not (self.min_speed_y <= self.initial_speed_y <= self.max_speed_y):
            raise ConfigError(f"initial vertical speed {self.initial_speed_y} outside [{self.min_speed_y}, {self.max_speed_y}]")
        if self.score_divisor <= 0:
            raise ConfigError("score divisor must be positive")
        if self.bot_speed < 0 or self.bot_speed_escalated < 0:
            raise ConfigError(f"bot speeds cannot be negative, got {self.bot_speed} and {self.bot_speed_escalated}")
        if self.win_score <= 0:
            raise ConfigError("win score must be positive")
        if self.fps < 0:
            raise ConfigError("fps cap cannot be negative")
