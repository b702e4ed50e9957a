import pygame
from config import BG, WHITE, GRAY, CENTER_LINE_DASH, BUTTON_LABEL, BUTTON_FILL, BUTTON_FILL_ACTIVE, BUTTON_RADIUS

def draw_center_line(surf, cfg):
    y = int(cfg.height / 2)
    w = int(cfg.width)
    for x in range(0, w, CENTER_LINE_DASH * 2):
        pygame.draw.line(surf, GRAY, (x, y), (min(x + CENTER_LINE_DASH, w), y), 1)

def draw_scores(surf, font, snap, cfg):
    mid = cfg.height / 2
    ply = font.render(f"{snap.player_score}", True, WHITE)
    bot = font.render(f"{snap.computer_score}", True, WHITE)
    surf.blit(ply, ply.get_rect(bottomleft=(20, int(mid + 50))))
    surf.blit(bot, bot.get_rect(bottomleft=(20, int(mid - 30))))

def draw_frame(surf, font, snap, cfg):
    surf.fill(BG)
    player_y = cfg.height - cfg.player_paddle_offset
    pygame.draw.rect(surf, WHITE, (int(snap.player_x), int(player_y), int(cfg.paddle_w), int(cfg.paddle_h)))
    pygame.draw.rect(surf, WHITE, (int(snap.bot_x), int(cfg.bot_paddle_offset), int(cfg.paddle_w), int(cfg.paddle_h)))
    draw_center_line(surf, cfg)
    pygame.draw.circle(surf, WHITE, (int(snap.ball_x), int(snap.ball_y)), int(cfg.ball_r))
    draw_scores(surf, font, snap, cfg)

def draw_title(screen, big, msg, color, dy=-64):
    w, h = screen.get_size()
    t = big.render(msg, True, color)
    screen.blit(t, t.get_rect(center=(w // 2, h // 2 + dy)))

def draw_button(screen, font, rect, text, active=False):
    fill = pygame.Surface(rect.size, pygame.SRCALPHA)
    fill.fill(BUTTON_FILL_ACTIVE if active else BUTTON_FILL)
    screen.blit(fill, rect.topleft)
    edge, label = (WHITE, WHITE) if active else (GRAY, BUTTON_LABEL)
    pygame.draw.rect(screen, edge, rect, 2, border_radius=BUTTON_RADIUS)
    t = font.render(text, True, label)
    screen.blit(t, t.get_rect(center=rect.center))

def game_over_button_rect(screen_size):
    w, h = screen_size
    rect = pygame.Rect(0, 0, 200, 44)
    rect.center = (w // 2, h // 2 + 10)
    return rect

def draw_game_over(screen, big, small, winner, active=False):
    """Results screen; returns the rect of the Play Again button."""
    screen.fill(BG)
    draw_title(screen, big, f"{winner} Wins!", WHITE)
    rect = game_over_button_rect(screen.get_size())
    draw_button(screen, small, rect, "Play Again", active=active)
    return rect
