import logging
import sys

import pygame

import config
from commands import DOWN, UP, KeyDown, KeyUp, MoveTo, TogglePause
from loop import FrameLoop
from pong import PongGame
from render import PygameSurface, Renderer, ScoreDisplay

logger = logging.getLogger(__name__)

DIRECTION_KEY_MAP = {pygame.K_UP: UP, pygame.K_DOWN: DOWN}
PAUSE_KEY = pygame.K_SPACE


def translate_event(event, court_top=0):
    # Maps a pygame event to a game command, or None for anything unrecognized.
    if event.type == pygame.MOUSEMOTION:
        return MoveTo(event.pos[1] - court_top)
    if event.type == pygame.KEYDOWN:
        if event.key == PAUSE_KEY:
            return TogglePause()
        if event.key in DIRECTION_KEY_MAP:
            return KeyDown(DIRECTION_KEY_MAP[event.key])
    if event.type == pygame.KEYUP and event.key in DIRECTION_KEY_MAP:
        return KeyUp(DIRECTION_KEY_MAP[event.key])
    return None


def wait_for_resume(game, renderer):
    # Blocks on the event queue instead of requesting frames.
    # Returns "resume", "menu" or "quit".
    renderer.draw_pause_overlay(game)
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return "quit"
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return "menu"
        command = translate_event(event)
        game.commands.push(command)
        if isinstance(command, TogglePause):
            return "resume"


def run_game(screen_surf):
    # Main game loop for a single player vs computer session.
    # Returns False when the application should exit.
    player_display = ScoreDisplay()
    computer_display = ScoreDisplay()
    game = PongGame(player_display=player_display, computer_display=computer_display)
    renderer = Renderer(PygameSurface(screen_surf), player_display, computer_display)
    frame_loop = FrameLoop(game, renderer)
    game_clock = pygame.time.Clock()
    logger.info("Starting game on a %dx%d court", game.width, game.height)

    while True:
        # --- Event Handling ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return True
            game.commands.push(translate_event(event))

        keep_running = frame_loop.frame(pygame.time.get_ticks())
        pygame.display.flip()

        if not keep_running:
            outcome = wait_for_resume(game, renderer)
            if outcome == "quit":
                return False
            if outcome == "menu":
                return True
            frame_loop.resume(pygame.time.get_ticks())
        game_clock.tick(config.FPS)


# Displays the main menu and handles user selections.
def show_menu(screen_surf):
    try:
        menu_font, title_font = pygame.font.Font(None, 40), pygame.font.Font(None, 60)
    except pygame.error:
        menu_font, title_font = pygame.font.SysFont(
            config.FONT_NAME, 36
        ), pygame.font.SysFont(config.FONT_NAME, 54)

    game_clock = pygame.time.Clock()
    menu_items = ["Play", "Exit"]
    selected_item_index = 0

    while True:  # Menu loop
        screen_surf.fill(config.BACKGROUND_COLOR)
        title_surface = title_font.render("PONG", True, config.SCORE_COLOR)
        screen_surf.blit(
            title_surface,
            (config.SCREEN_WIDTH // 2 - title_surface.get_width() // 2, 70),
        )
        for i, option_text in enumerate(menu_items):
            text_color = (
                config.BALL_COLOR if i == selected_item_index else (200, 200, 220)
            )
            text_render_surface = menu_font.render(
                f"{i + 1}. {option_text}", True, text_color
            )
            screen_surf.blit(
                text_render_surface,
                (
                    config.SCREEN_WIDTH // 2 - text_render_surface.get_width() // 2,
                    180 + i * 50,
                ),
            )
        hint_surface = menu_font.render(
            "Mouse or Up/Down to move, Space to pause", True, config.HUD_TEXT_COLOR
        )
        screen_surf.blit(
            hint_surface,
            (
                config.SCREEN_WIDTH // 2 - hint_surface.get_width() // 2,
                config.SCREEN_HEIGHT - 80,
            ),
        )
        pygame.display.flip()

        # Handle menu input
        for menu_event in pygame.event.get():
            if menu_event.type == pygame.QUIT:
                return "Exit"
            if menu_event.type == pygame.KEYDOWN:
                if menu_event.key == pygame.K_UP:
                    selected_item_index = (selected_item_index - 1) % len(menu_items)
                elif menu_event.key == pygame.K_DOWN:
                    selected_item_index = (selected_item_index + 1) % len(menu_items)
                elif menu_event.key == pygame.K_1:
                    return menu_items[0]
                elif menu_event.key in (pygame.K_2, pygame.K_ESCAPE):
                    return menu_items[1]
                elif menu_event.key in (pygame.K_RETURN, pygame.K_SPACE):
                    return menu_items[selected_item_index]
        game_clock.tick(30)


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    pygame.init()
    screen_surf = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
    pygame.display.set_caption(config.WINDOW_CAPTION)

    while show_menu(screen_surf) == "Play":
        if not run_game(screen_surf):
            break

    logger.info("Exiting")
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
