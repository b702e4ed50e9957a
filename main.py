import argparse
import logging

import pygame

import ui
from config import Settings, ConfigError, PROFILES, FPS, WIN_SCORE, MOBILE_MAX_WIDTH, SCORE_FONT, W
from game import GameLoop

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Pong against a reactive bot")
    parser.add_argument("--profile", choices=["auto"] + sorted(PROFILES), default="auto",
                        help="device profile for ball and bot speeds (auto: mobile on narrow displays)")
    parser.add_argument("--fps", type=int, default=FPS, help="frame cap, 0 = unlimited")
    parser.add_argument("--window-width", type=int, default=W,
                        help="window width; the field is centered inside it")
    parser.add_argument("--win-score", type=int, default=WIN_SCORE, help="points needed to win")
    parser.add_argument("--log-level", default="warning",
                        choices=["debug", "info", "warning", "error"])
    return parser


def detect_profile():
    info = pygame.display.Info()
    if 0 < info.current_w <= MOBILE_MAX_WIDTH:
        return "mobile"
    return "desktop"


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    profile = detect_profile() if args.profile == "auto" else args.profile
    win_w = max(args.window_width, W)
    try:
        cfg = Settings.for_profile(
            profile,
            win_score=args.win_score,
            fps=args.fps,
            canvas_offset=(win_w - W) // 2,
        )
    except ConfigError as e:
        pygame.quit()
        parser.error(str(e))
    logger.info("profile %s, window %dx%d", profile, win_w, cfg.height)

    screen = pygame.display.set_mode((win_w, int(cfg.height)))
    pygame.display.set_caption("Pong")
    field = screen.subsurface(pygame.Rect(int(cfg.canvas_offset), 0, int(cfg.width), int(cfg.height)))
    clock = pygame.time.Clock()

    score_font = pygame.font.SysFont(*SCORE_FONT)
    big = pygame.font.SysFont("courier new", 48, bold=True)
    small = pygame.font.SysFont("courier new", 22)

    running = True
    winner = None

    def on_game_over(name):
        nonlocal winner
        winner = name
        pygame.mouse.set_visible(True)

    def handle_quit(e):
        nonlocal running
        if e.type == pygame.QUIT:
            running = False
        elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
            running = False

    def next_frame():
        pygame.display.flip()
        clock.tick(cfg.fps)
        for e in pygame.event.get():
            handle_quit(e)
            if e.type == pygame.MOUSEMOTION:
                game.pointer.push(e.pos[0])
        return running

    game = GameLoop(
        cfg,
        render=lambda snap: ui.draw_frame(field, score_font, snap, cfg),
        on_game_over=on_game_over,
    )

    pygame.mouse.set_visible(False)
    game.start()

    while running:
        game.run(next_frame)
        while running and not game.running:
            hover = ui.game_over_button_rect(screen.get_size()).collidepoint(pygame.mouse.get_pos())
            btn = ui.draw_game_over(screen, big, small, winner, active=hover)
            pygame.display.flip()
            clock.tick(cfg.fps)
            for e in pygame.event.get():
                handle_quit(e)
                if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1 and btn.collidepoint(e.pos):
                    pygame.mouse.set_visible(False)
                    game.restart()

    pygame.quit()


if __name__ == "__main__":
    main()
