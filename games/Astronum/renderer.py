"""
Pygame drawing for an Astronum round.

Game objects live in arena-local coordinates; everything is shifted by the
arena origin when drawn.
"""
from typing import TYPE_CHECKING

import pygame

from games.Astronum import config

if TYPE_CHECKING:
    from games.Astronum.game_mode import AstronumMode

_fonts = {}


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        # Fonts from an earlier pygame session are no longer usable
        pygame.font.init()
        _fonts.clear()
    if size not in _fonts:
        _fonts[size] = pygame.font.Font(None, size)
    return _fonts[size]


def _blit_centered(screen: pygame.Surface, text: str, size: int, center,
                   color=config.TEXT_COLOR) -> None:
    surface = _font(size).render(text, True, color)
    screen.blit(surface, surface.get_rect(center=center))


def render_title(screen: pygame.Surface, game: 'AstronumMode') -> None:
    """Equation strip: three slots with the + and = signs between them."""
    width = screen.get_width()
    pygame.draw.rect(screen, config.TITLE_COLOR, (0, 0, width, config.TITLE_HEIGHT))

    slot_w = min(90, width // 5)
    slot_h = config.TITLE_HEIGHT // 2
    mid_y = config.TITLE_HEIGHT // 2
    signs = ('+', '=')
    total_w = slot_w * 3 + 40 * 2
    x = (width - total_w) // 2
    for idx, slot in enumerate(game.equation.slots):
        rect = pygame.Rect(x, mid_y - slot_h // 2, slot_w, slot_h)
        pygame.draw.rect(screen, config.SLOT_COLOR, rect, border_radius=6)
        if slot is not None:
            _blit_centered(screen, str(slot), 36, rect.center)
        x += slot_w
        if idx < len(signs):
            _blit_centered(screen, signs[idx], 36, (x + 20, mid_y))
            x += 40


def render_arena(screen: pygame.Surface, game: 'AstronumMode') -> None:
    """Asteroids and ship."""
    arena = game.arena
    ox, oy = arena.x, arena.y
    pygame.draw.rect(screen, config.BACKGROUND_COLOR,
                     (int(ox), int(oy), int(arena.width), int(arena.height)))

    for asteroid in game.asteroids:
        if not asteroid.visible:
            continue
        radius = asteroid.size / 2
        center = (int(ox + asteroid.position.x + radius), int(oy + asteroid.position.y + radius))
        pygame.draw.circle(screen, config.ASTEROID_COLOR, center, int(radius))
        _blit_centered(screen, str(asteroid.value), 28, center, config.ASTEROID_TEXT_COLOR)

    outline = [(ox + p.x, oy + p.y) for p in game.ship.get_outline()]
    pygame.draw.polygon(screen, config.SHIP_COLOR, outline)


def render_overlay(screen: pygame.Surface, game: 'AstronumMode') -> None:
    """Dimmed arena with the overlay title and subtitle, if any."""
    if game.overlay is None:
        return
    arena = game.arena
    shade = pygame.Surface((int(arena.width), int(arena.height)), pygame.SRCALPHA)
    shade.fill(config.OVERLAY_COLOR)
    screen.blit(shade, (int(arena.x), int(arena.y)))

    title, subtitle = game.overlay
    cx = int(arena.center.x)
    cy = int(arena.center.y)
    _blit_centered(screen, title, 48, (cx, cy - 20))
    if subtitle:
        _blit_centered(screen, subtitle, 22, (cx, cy + 20))


def render_round(screen: pygame.Surface, game: 'AstronumMode') -> None:
    """Draw the whole round."""
    screen.fill(config.BACKGROUND_COLOR)
    render_title(screen, game)
    render_arena(screen, game)
    render_overlay(screen, game)
