"""Bubble Shooter - pygame front end for tick-bubble.

Controls:
  Click      Start (loading screen)
  Drag       Aim from the launcher, release to shoot
  Right btn  Cancel the current aim
  R          Reset
  Esc        Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_bubble import AnimState, BubbleConfig, BubbleGame, GameView, Phase

# --- Configuration ---
FPS = 60
TITLE = "Bubble Shooter"
HUD_H = 40

BG_COLOR = (26, 26, 46)
HUD_COLOR = (200, 200, 220)
LINE_COLOR = (255, 80, 80)
AIM_COLOR = (255, 255, 255)
OUTLINE_COLOR = (15, 15, 25)

PHASE_TEXT = {
    Phase.LOADING: "Click to start",
    Phase.AIMING: "Drag to aim, release to shoot",
    Phase.SHOT: "",
    Phase.GAME_OVER: "Game over - press R",
    Phase.WIN: "You win! - press R",
}


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def fade(color: tuple[int, int, int], alpha: float) -> tuple[int, int, int]:
    """Blend ``color`` toward the background by ``alpha``."""
    return tuple(
        int(bg + (c - bg) * alpha) for c, bg in zip(color, BG_COLOR)
    )  # type: ignore[return-value]


def draw_bubble(surface, color: str, x: float, y: float, radius: float, alpha: float = 1.0) -> None:
    if radius < 1:
        return
    rgb = fade(hex_to_rgb(color), alpha)
    pos = (int(x), int(y) + HUD_H)
    pygame.draw.circle(surface, rgb, pos, int(radius))
    pygame.draw.circle(surface, OUTLINE_COLOR, pos, int(radius), 1)


def draw(screen, font, game: BubbleGame, view: GameView) -> None:
    cfg = game.config
    half = cfg.half_size
    screen.fill(BG_COLOR)

    # Loss line
    y = int(view.loss_line) + HUD_H
    pygame.draw.line(screen, LINE_COLOR, (0, y), (int(cfg.canvas_width), y), 1)

    for bubble in view.bubbles:
        if bubble.state is AnimState.POPPING:
            draw_bubble(screen, bubble.color, bubble.x, bubble.y, half * bubble.scale, bubble.alpha)
        else:
            draw_bubble(screen, bubble.color, bubble.x, bubble.y, half)

    if view.loaded_color is not None:
        draw_bubble(screen, view.loaded_color, cfg.spawn_x, cfg.spawn_y, half)
    if view.projectile is not None:
        p = view.projectile
        draw_bubble(screen, p.color, p.x, p.y, half)
    if view.next_color is not None:
        draw_bubble(screen, view.next_color, cfg.spawn_x + cfg.cell_size * 2, cfg.spawn_y, half * 0.6)

    if view.aim is not None:
        dx, dy = view.aim
        start = (int(cfg.spawn_x), int(cfg.spawn_y) + HUD_H)
        end = (int(cfg.spawn_x + dx), int(cfg.spawn_y + dy) + HUD_H)
        pygame.draw.line(screen, AIM_COLOR, start, end, 2)

    # --- HUD ---
    countdown = ""
    if view.row_countdown is not None:
        countdown = f"   Next row: {view.row_countdown / cfg.tps:4.1f}s"
    hud_lines = [
        f"Popped: {view.popped_count}/{view.win_threshold}{countdown}",
        PHASE_TEXT[view.phase],
    ]
    for i, line in enumerate(hud_lines):
        surf = font.render(line, True, HUD_COLOR)
        screen.blit(surf, (10, 4 + i * 18))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--win", type=int, default=20, help="bubbles to pop to win")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game = BubbleGame(BubbleConfig(seed=args.seed, win_threshold=args.win))
    cfg = game.config

    pygame.init()
    screen = pygame.display.set_mode((int(cfg.canvas_width), int(cfg.canvas_height) + HUD_H))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    tick_interval = 1.0 / cfg.tps
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    game.reset()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                mx, my = event.pos
                if event.button == 1:
                    if not game.enter_play():
                        game.pointer_down(float(mx), float(my - HUD_H))
                elif event.button == 3:
                    game.pointer_cancel()
            elif event.type == pygame.MOUSEMOTION:
                mx, my = event.pos
                game.pointer_move(float(mx), float(my - HUD_H))
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                game.pointer_up()

        # --- Tick ---
        steps = int(accumulator // tick_interval)
        if steps:
            game.tick(steps)
            accumulator -= steps * tick_interval

        # --- Render ---
        draw(screen, font, game, game.snapshot())
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
