"""Playfield renderer, HUD and overlay screens"""

from __future__ import annotations

import math
import random

import pygame

from starry_defense.constants import (
    HUD_PADDING, TEXT_COLOR, ACCENT_COLOR, GOLD_COLOR, DANGER_COLOR, BG_COLOR,
    WIN_SCORE, FONT_NAME, FONT_SIZE_SMALL
)
from starry_defense.engine import Snapshot
from starry_defense.models import CityView, TurretView, RocketView, InterceptorView, ExplosionView
from starry_defense.rounds import GameState

ENEMY_COLOR = (45, 90, 39)
ENEMY_STRIPE = (27, 58, 26)
ENEMY_TRAIL = (38, 88, 40)
INTERCEPTOR_COLOR = (68, 255, 68)
TURRET_COLOR = (136, 136, 136)
TRAIL_LEN = 0.08


class Playfield:
    """Draws the sky, structures and every moving actor from a snapshot."""

    STAR_COUNT = 50

    def __init__(self, width: int, height: int) -> None:
        self.font = pygame.font.Font(FONT_NAME, 10)
        self.stars: list[tuple[float, float, int, float]] = []
        self.make_stars(width, height)

    def make_stars(self, width: int, height: int) -> None:
        """Scatter twinkling stars over the current window size."""
        self.stars = [
            (random.random() * width, random.random() * height,
             random.randint(1, 2), random.uniform(2.0, 5.0))
            for _ in range(self.STAR_COUNT)
        ]

    def draw(self, surf: pygame.Surface, snap: Snapshot, now_ms: int,
             background: pygame.Surface | None = None) -> None:
        """Compose the playfield: sky → structures → rockets → interceptors → explosions."""
        if background:
            surf.blit(background, (0, 0))
        else:
            surf.fill(BG_COLOR)
            self.draw_stars(surf, now_ms)
        for city in snap.cities:
            self.draw_city(surf, city)
        for turret in snap.turrets:
            self.draw_turret(surf, turret)
        for enemy in snap.enemies:
            self.draw_enemy(surf, enemy)
        for missile in snap.interceptors:
            self.draw_interceptor(surf, missile)
        for exp in snap.explosions:
            self.draw_explosion(surf, exp)

    def draw_stars(self, surf: pygame.Surface, now_ms: int) -> None:
        for x, y, size, period in self.stars:
            pulse = 0.65 + 0.35 * math.sin(now_ms / 1000.0 * 2 * math.pi / period)
            shade = int(255 * 0.3 * pulse)
            pygame.draw.circle(surf, (shade, shade, shade), (int(x), int(y)), size)

    def draw_city(self, surf: pygame.Surface, city: CityView) -> None:
        if city.is_destroyed:
            return
        x, y = int(city.x), int(city.y)
        pygame.draw.rect(surf, ACCENT_COLOR, pygame.Rect(x - 15, y, 30, 20))
        pygame.draw.rect(surf, (42, 126, 255), pygame.Rect(x - 10, y - 10, 20, 10))

    def draw_turret(self, surf: pygame.Surface, turret: TurretView) -> None:
        if turret.is_destroyed:
            return
        x, y = int(turret.x), int(turret.y)
        pygame.draw.polygon(surf, TURRET_COLOR, [(x - 20, y + 20), (x + 20, y + 20), (x, y - 10)])
        # Ammo indicator
        ammo = self.font.render(str(turret.missiles), True, TEXT_COLOR)
        surf.blit(ammo, ammo.get_rect(center=(x, y + 35)))

    def draw_enemy(self, surf: pygame.Surface, enemy: RocketView) -> None:
        """Striped watermelon spinning with its progress, trailing toward where it came from."""
        # Trail
        end = (enemy.x - (enemy.target_x - enemy.x) * TRAIL_LEN,
               enemy.y - (enemy.target_y - enemy.y) * TRAIL_LEN)
        pygame.draw.line(surf, ENEMY_TRAIL, (enemy.x, enemy.y), end, 3)

        body = pygame.Surface((24, 24), pygame.SRCALPHA)
        pygame.draw.ellipse(body, ENEMY_COLOR, pygame.Rect(4, 1, 16, 22))
        for i in (-1, 0, 1):
            pygame.draw.line(body, ENEMY_STRIPE, (12 + i * 3, 3), (12 + i * 4, 21), 2)
        body = pygame.transform.rotate(body, -math.degrees(enemy.progress * 15))
        surf.blit(body, body.get_rect(center=(int(enemy.x), int(enemy.y))))

    def draw_interceptor(self, surf: pygame.Surface, missile: InterceptorView) -> None:
        # Aim marker
        tx, ty, s = missile.target_x, missile.target_y, 3
        pygame.draw.line(surf, TEXT_COLOR, (tx - s, ty - s), (tx + s, ty + s))
        pygame.draw.line(surf, TEXT_COLOR, (tx + s, ty - s), (tx - s, ty + s))
        pygame.draw.line(surf, INTERCEPTOR_COLOR, (missile.start_x, missile.start_y), (missile.x, missile.y))

    def draw_explosion(self, surf: pygame.Surface, exp: ExplosionView) -> None:
        if exp.radius <= 0:
            return
        alpha = exp.radius / exp.max_radius if exp.is_shrinking else 1.0
        r = max(1, int(exp.radius))
        blast = pygame.Surface((r * 2 + 2, r * 2 + 2), pygame.SRCALPHA)
        pygame.draw.circle(blast, (255, 255, 255, int(255 * alpha * 0.6)), (r + 1, r + 1), r)
        pygame.draw.circle(blast, (255, 200, 50, int(255 * alpha)), (r + 1, r + 1), r, 1)
        surf.blit(blast, (exp.x - r - 1, exp.y - r - 1))


class HUD:
    """Heads-Up Display with left/right split layout."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)

    def update_fonts(self, new_font: pygame.font.Font) -> None:
        """Update fonts for responsive scaling."""
        self.font = new_font

    def draw(self, surf: pygame.Surface, snap: Snapshot, show_fps: bool = False,
             fps: float = 0.0, paused: bool = False, muted: bool = False) -> None:
        """Render score and round on the left, counters and indicators on the right."""
        current_width = surf.get_width()
        current_height = surf.get_height()

        responsive_padding = max(8, int(HUD_PADDING * (min(current_width, current_height) / 540)))
        left_x = responsive_padding
        left_y = responsive_padding

        # LEFT SIDE: Score and Round
        score_text = self.font.render(f"Score: {snap.score} / {WIN_SCORE}", True, GOLD_COLOR)
        surf.blit(score_text, (left_x, left_y))
        left_y += score_text.get_height() + 4

        round_text = self.small_font.render(f"Round: {snap.round}", True, TEXT_COLOR)
        surf.blit(round_text, (left_x, left_y))

        # RIGHT SIDE: Round counters and optional indicators
        right_stats = [
            f"Destroyed: {snap.enemies_destroyed}",
            f"Incoming: {snap.enemies_spawned}/{snap.enemies_quota}",
            f"Missiles: {sum(t.missiles for t in snap.turrets if not t.is_destroyed)}",
        ]
        rendered = [self.font.render(line, True, TEXT_COLOR) for line in right_stats]
        stats_width = max(text_surf.get_width() for text_surf in rendered)
        right_x = current_width - stats_width - responsive_padding
        right_y = responsive_padding

        for text_surf in rendered:
            surf.blit(text_surf, (right_x, right_y))
            right_y += text_surf.get_height() + 4

        if show_fps:
            right_y += 4
            fps_color = (0, 255, 0) if fps >= 55 else (255, 255, 0) if fps >= 30 else (255, 0, 0)
            fps_text = self.small_font.render(f"FPS: {fps:.1f}", True, fps_color)
            surf.blit(fps_text, (right_x, right_y))
            right_y += fps_text.get_height() + 4

        if muted:
            right_y += 4
            muted_text = self.small_font.render("MUTED", True, (255, 150, 150))
            surf.blit(muted_text, (right_x, right_y))

        if paused:
            pause_text = self.font.render("PAUSED", True, (255, 255, 100))
            pause_y = max(80, int(current_height * 0.15))  # 15% from top, minimum 80px
            text_rect = pause_text.get_rect(center=(current_width // 2, pause_y))
            bg_rect = text_rect.inflate(20, 10)
            bg_surf = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
            bg_surf.fill((0, 0, 0, 128))
            surf.blit(bg_surf, bg_rect)
            surf.blit(pause_text, text_rect)


class OverlayScreen:
    """Round complete, victory and defeat panels, each with one button."""

    PANELS = {
        GameState.ROUND_END: ("Round {round} Complete", (255, 255, 255), "NEXT ROUND", "[SPACE] next round"),
        GameState.WIN: ("Victory! Galaxy Defended", GOLD_COLOR, "PLAY AGAIN", "[R] restart | [ESC] quit"),
        GameState.GAMEOVER: ("Defense Breached - Mission Failed", DANGER_COLOR, "PLAY AGAIN", "[R] restart | [ESC] quit"),
    }

    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small

    def update_fonts(self, new_font_big: pygame.font.Font, new_font_small: pygame.font.Font) -> None:
        """Update fonts for responsive scaling."""
        self.font_big = new_font_big
        self.font_small = new_font_small

    @staticmethod
    def button_rect(width: int, height: int) -> pygame.Rect:
        return pygame.Rect(width // 2 - 100, height // 2 + 50, 200, 50)

    def message_lines(self, snap: Snapshot) -> list[str]:
        if snap.state is GameState.ROUND_END:
            return [f"Score: {snap.score}", f"Missile bonus: +{snap.last_bonus}"]
        if snap.state is GameState.WIN:
            return [f"Congratulations! You reached {WIN_SCORE} points.", f"Final Score: {snap.score}"]
        return ["All turrets have been destroyed.", f"Final Score: {snap.score}"]

    def draw(self, surf: pygame.Surface, snap: Snapshot, mouse_pos: tuple[int, int]) -> None:
        """Draw the panel for the snapshot's state; nothing while playing."""
        if snap.state not in self.PANELS:
            return
        title, color, label, hint = self.PANELS[snap.state]
        current_width = surf.get_width()
        current_height = surf.get_height()

        overlay = pygame.Surface((current_width, current_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        surf.blit(overlay, (0, 0))

        title_text = self.font_big.render(title.format(round=snap.round), True, color)
        title_y = max(80, int(current_height * 0.25))  # 25% from top, minimum 80px
        surf.blit(title_text, title_text.get_rect(center=(current_width // 2, title_y)))

        y_offset = max(title_y + 60, int(current_height * 0.35))
        for line in self.message_lines(snap):
            text_surf = self.font_small.render(line, True, TEXT_COLOR)
            surf.blit(text_surf, text_surf.get_rect(center=(current_width // 2, y_offset)))
            y_offset += 30

        button = self.button_rect(current_width, current_height)
        hovered = button.collidepoint(mouse_pos)
        pygame.draw.rect(surf, (60, 110, 200) if hovered else (37, 99, 235), button)
        pygame.draw.rect(surf, TEXT_COLOR, button, 2)
        label_text = self.font_small.render(label, True, TEXT_COLOR)
        surf.blit(label_text, label_text.get_rect(center=button.center))

        inst_text = self.font_small.render(hint, True, (150, 150, 150))
        surf.blit(inst_text, inst_text.get_rect(center=(current_width // 2, button.bottom + 30)))
