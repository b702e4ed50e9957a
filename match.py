import logging
from dataclasses import dataclass
from typing import Optional

from config import WIN_SCORE, PROFILES

logger = logging.getLogger(__name__)

PLAYER = "PLAYER"
COMPUTER = "COMPUTER"

WINNER_NAMES = {PLAYER: "Player", COMPUTER: "Computer"}

@dataclass
class MatchState:
    """Scores, latches and lifecycle flags of one session.

    ``player_moved`` and ``paddle_contact`` are latches: once true they stay
    true, also across restarts.
    """
    win_score: int = WIN_SCORE
    bot_speed: float = PROFILES["desktop"]["bot_speed"]
    player_score: int = 0
    computer_score: int = 0
    player_moved: bool = False
    paddle_contact: bool = False
    round_active: bool = False
    game_over: bool = True
    winner: Optional[str] = None

    def new_game(self, bot_speed):
        self.player_score = 0
        self.computer_score = 0
        self.bot_speed = bot_speed
        self.winner = None
        self.game_over = False
        self.round_active = True

    def award(self, side):
        if side == PLAYER:
            self.player_score += 1
        elif side == COMPUTER:
            self.computer_score += 1
        else:
            raise ValueError(f"unknown side {side!r}")
        logger.debug("%s scores (%d:%d)", WINNER_NAMES[side], self.player_score, self.computer_score)

    def check_win(self):
        if self.player_score == self.win_score:
            self.winner = PLAYER
        elif self.computer_score == self.win_score:
            self.winner = COMPUTER
        else:
            return None
        self.game_over = True
        self.round_active = False
        return self.winner

    @property
    def winner_name(self):
        return WINNER_NAMES.get(self.winner)
