import pygame

import config


class PygameSurface:
    # Drawing primitives over a pygame Surface
    def __init__(self, surface):
        self.surface = surface
        if not pygame.font.get_init():
            pygame.font.init()
        self._fonts = {}

    def _font(self, size):
        if size not in self._fonts:
            try:  # Font loading
                self._fonts[size] = pygame.font.Font(None, size)
            except pygame.error:
                self._fonts[size] = pygame.font.SysFont(config.FONT_NAME, size)
        return self._fonts[size]

    def get_size(self):
        return self.surface.get_size()

    def clear(self, color):
        self.surface.fill(color)

    def fill_rect(self, rect, color, radius=0):
        rect = pygame.Rect(rect)
        if len(color) == 4:  # Translucent fill, blended onto what is already drawn
            overlay_surf = pygame.Surface(rect.size, pygame.SRCALPHA)
            pygame.draw.rect(
                overlay_surf, color, overlay_surf.get_rect(), border_radius=radius
            )
            self.surface.blit(overlay_surf, rect.topleft)
        else:
            pygame.draw.rect(self.surface, color, rect, border_radius=radius)

    def fill_circle(self, center, radius, color):
        pygame.draw.circle(self.surface, color, center, radius)

    def text(self, text_str, pos, color, size=config.HUD_FONT_SIZE, centered=False):
        text_surf = self._font(size).render(text_str, True, color)
        x, y = pos
        if centered:
            x -= text_surf.get_width() // 2
        self.surface.blit(text_surf, (x, y))


class ScoreDisplay:
    def __init__(self):
        self.value = 0

    def show(self, value):
        self.value = value

    def __str__(self):
        return str(self.value)


class Renderer:
    # Read-only pass; surface needs clear, fill_rect, fill_circle and text.
    def __init__(self, surface, player_display=None, computer_display=None):
        self.surface = surface
        self.player_display = player_display
        self.computer_display = computer_display

    def draw_center_line(self, game):
        mid_x = game.width / 2 - 1
        y = config.CENTER_DASH_START
        while y < game.height:
            self.surface.fill_rect(
                (mid_x, y, 2, config.CENTER_DASH_HEIGHT), config.CENTER_LINE_COLOR
            )
            y += config.CENTER_DASH_HEIGHT + config.CENTER_DASH_GAP

    def draw_paddle(self, paddle):
        self.surface.fill_rect(
            (paddle.x, paddle.y, paddle.width, paddle.height),
            config.PADDLE_COLOR,
            radius=config.PADDLE_CORNER_RADIUS,
        )

    def draw_hud(self, game):
        self.surface.fill_rect(config.HUD_PANEL_RECT, config.HUD_PANEL_COLOR)
        self.surface.text(
            f"Ball: {game.ball.speed:.2f} px/frame",
            config.HUD_TEXT_POS,
            config.HUD_TEXT_COLOR,
        )

    def draw_scores(self, game):
        for display, x_pos in (
            (self.player_display, game.width // 4),
            (self.computer_display, game.width * 3 // 4),
        ):
            if display is not None:
                self.surface.text(
                    str(display),
                    (x_pos, config.SCORE_TOP),
                    config.SCORE_COLOR,
                    size=config.SCORE_FONT_SIZE,
                    centered=True,
                )

    def draw(self, game):
        self.surface.clear(config.BACKGROUND_COLOR)
        self.draw_center_line(game)
        self.draw_paddle(game.player)
        self.draw_paddle(game.computer)
        ball = game.ball
        self.surface.fill_circle(
            (ball.pos.x, ball.pos.y), ball.radius, config.BALL_COLOR
        )
        self.draw_hud(game)
        self.draw_scores(game)

    def draw_pause_overlay(self, game):
        self.surface.fill_rect((0, 0, game.width, game.height), (0, 0, 0, 180))
        pause_texts = [
            ("PAUSED", (255, 255, 255), config.SCORE_FONT_SIZE, -40),
            ("Press Space to Resume", (200, 200, 200), 32, 20),
            ("Press Esc for Menu", (200, 200, 200), 32, 60),
        ]
        for text_str, color_rgb, size, y_offset in pause_texts:
            self.surface.text(
                text_str,
                (game.width // 2, game.height // 2 + y_offset),
                color_rgb,
                size=size,
                centered=True,
            )
