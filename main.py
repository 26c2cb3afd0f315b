"""Game entry point"""

from __future__ import annotations

import os

import pygame

from starry_defense.clock import FrameClock
from starry_defense.constants import *
from starry_defense.engine import Engine
from starry_defense.logger import GameLogger
from starry_defense.rounds import GameState
from ui import HUD, OverlayScreen, Playfield


class Game:
    """
    Main game controller: owns the window and the engine, runs the loop,
    turns input into engine commands, and draws each frame from a snapshot.
    """

    def __init__(self) -> None:
        """Initialize subsystems, load assets, and set initial game state."""
        pygame.init()
        pygame.display.set_caption("Starry Defense")

        # Make window resizable
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.frame_clock = FrameClock()
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)
        self.font_title = pygame.font.Font(FONT_NAME, FONT_SIZE_TITLE)
        self.current_width = WIDTH
        self.current_height = HEIGHT
        self.background_img: pygame.Surface | None = None
        self.load_background()

        self.engine = Engine(WIDTH, HEIGHT)
        self.logger = GameLogger(LOG_FILE)

        self.paused = False
        self.show_fps = False
        self.fps_samples: list[float] = []

        # Audio
        self.bgm_volume = 0.5
        self.sfx_volume = 0.7
        self.muted = False
        self.snd_fire: pygame.mixer.Sound | None = None
        self.snd_boom: pygame.mixer.Sound | None = None
        self.init_audio()

        self.playfield = Playfield(WIDTH, HEIGHT)
        self.hud = HUD(self.font_small)
        self.overlay = OverlayScreen(self.font_big, self.font_small)

    # --------------------------------- Setup ----------------------------------------

    def load_background(self) -> None:
        """
        Load and scale the optional background image to current window size.
        """
        if os.path.exists(BACKGROUND_PATH):
            try:
                img = pygame.image.load(BACKGROUND_PATH).convert()
                self.background_img = pygame.transform.scale(img, (self.current_width, self.current_height))
            except Exception as e:
                print(f"Failed to load background: {e}")
                self.background_img = None
        else:
            self.background_img = None

    def load_sound(self, path: str) -> pygame.mixer.Sound | None:
        if not os.path.exists(path):
            print(f"Sound effect file not found: {path}")
            return None
        try:
            sound = pygame.mixer.Sound(path)
            sound.set_volume(self.sfx_volume)
            return sound
        except Exception as e:
            print(f"Failed to load sound effect {path}: {e}")
            return None

    def init_audio(self) -> None:
        """
        Initialize audio & load assets.
        """
        try:
            pygame.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            print(f"Audio unavailable: {e}")
            return

        if os.path.exists(MUSIC_PATH):
            try:
                pygame.mixer.music.load(MUSIC_PATH)
                pygame.mixer.music.set_volume(self.bgm_volume)
                pygame.mixer.music.play(-1)
            except Exception as e:
                print(f"Failed to load background music: {e}")
        else:
            print(f"Background music file not found: {MUSIC_PATH}")

        self.snd_fire = self.load_sound(FIRE_SFX_PATH)
        self.snd_boom = self.load_sound(EXPLOSION_SFX_PATH)

    def handle_resize(self, new_width: int, new_height: int) -> None:
        """Handle window resize events and update game elements accordingly."""
        if new_width == self.current_width and new_height == self.current_height:
            return
        self.current_width = new_width
        self.current_height = new_height
        self.screen.fill(BG_COLOR)
        self.load_background()
        self.playfield.make_stars(new_width, new_height)
        self.engine.resize(new_width, new_height)

        scale_factor = min(new_width / WIDTH, new_height / HEIGHT)
        self.font_small = pygame.font.Font(FONT_NAME, max(12, int(FONT_SIZE_MEDIUM * scale_factor)))
        self.font_big = pygame.font.Font(FONT_NAME, max(18, int(FONT_SIZE_LARGE * scale_factor)))
        self.hud.update_fonts(self.font_small)
        self.overlay.update_fonts(self.font_big, self.font_small)
        print(f"Window resized to {new_width}x{new_height} with scale factor {scale_factor:.2f}")

    # --------------------------------- Commands -------------------------------------

    def start_game(self) -> None:
        self.engine.start_new_game(self.current_width, self.current_height)
        self.paused = False
        self.frame_clock.reset(pygame.time.get_ticks())

    def next_round(self) -> None:
        if self.engine.advance_round():
            self.frame_clock.reset(pygame.time.get_ticks())

    def toggle_pause(self) -> None:
        if self.engine.state is not GameState.PLAYING:
            return
        self.paused = not self.paused
        if not self.paused:
            # Resuming: paused time is never integrated
            self.frame_clock.reset(pygame.time.get_ticks())

    def toggle_mute(self) -> None:
        self.muted = not self.muted
        if pygame.mixer.get_init():
            pygame.mixer.music.set_volume(0.0 if self.muted else self.bgm_volume)

    def play(self, sound: pygame.mixer.Sound | None) -> None:
        if sound and not self.muted:
            try:
                sound.play()
            except pygame.error:
                pass

    def overlay_action(self) -> None:
        """Run the action behind the current overlay's button."""
        state = self.engine.state
        if state is GameState.ROUND_END:
            self.next_round()
        elif state in (GameState.WIN, GameState.GAMEOVER):
            self.start_game()

    # --------------------------------- Loop -----------------------------------------

    def show_start_screen(self) -> bool:
        """
        Display the start screen with instructions.

        Returns
        -------
        bool
            True if user wants to start game, False if quit
        """
        while True:
            mouse_pos = pygame.mouse.get_pos()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.VIDEORESIZE:
                    self.handle_resize(event.w, event.h)
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return False
                    if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                        return True
                    if event.key == pygame.K_m:
                        self.toggle_mute()
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and self.start_button_rect().collidepoint(mouse_pos):
                    return True

            self.draw_start_screen(mouse_pos)
            self.clock.tick(FPS)

    def start_button_rect(self) -> pygame.Rect:
        return OverlayScreen.button_rect(self.current_width, self.current_height)

    def draw_start_screen(self, mouse_pos: tuple[int, int]) -> None:
        """Draw the start screen over the idle playfield."""
        self.playfield.draw(self.screen, self.engine.snapshot(), pygame.time.get_ticks(), self.background_img)

        title_text = self.font_title.render("STARRY DEFENSE", True, ACCENT_COLOR)
        title_rect = title_text.get_rect(center=(self.current_width // 2, self.current_height // 2 - 120))
        self.screen.blit(title_text, title_rect)

        button_rect = self.start_button_rect()
        button_color = (60, 110, 200) if button_rect.collidepoint(mouse_pos) else (37, 99, 235)
        pygame.draw.rect(self.screen, button_color, button_rect)
        pygame.draw.rect(self.screen, TEXT_COLOR, button_rect, 2)
        start_text = self.font_small.render("START GAME", True, TEXT_COLOR)
        self.screen.blit(start_text, start_text.get_rect(center=button_rect.center))

        instructions = [
            "CONTROLS:",
            "Left Click - Intercept rockets, lead your targets",
            "P - Pause/Resume",
            "M - Toggle mute",
            "ESC - Quit"
        ]
        y_start = button_rect.bottom + 30
        for i, instruction in enumerate(instructions):
            color = (255, 255, 100) if i == 0 else (180, 180, 180)
            text = self.font_small.render(instruction, True, color)
            self.screen.blit(text, text.get_rect(center=(self.current_width // 2, y_start + i * 25)))

        pygame.display.flip()

    def run(self) -> None:
        """Main game entry point: show start screen then run game loop."""
        if not self.show_start_screen():
            pygame.quit()
            return
        self.start_game()
        self.run_game_loop()

    def run_game_loop(self) -> None:
        """Main game loop: process events, tick the engine, render; exits on quit request."""
        running = True
        while running:
            self.fps_samples.append(self.clock.get_fps())
            if len(self.fps_samples) > 10:
                self.fps_samples.pop(0)
            avg_fps = sum(self.fps_samples) / len(self.fps_samples)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.handle_resize(event.w, event.h)
                elif event.type == pygame.KEYDOWN and not self.handle_key(event.key):
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.handle_click(event.pos)

            if self.engine.state is GameState.PLAYING and not self.paused:
                dt = self.frame_clock.tick(pygame.time.get_ticks())
                self.engine.tick(dt)

            self.process_events()
            self.draw(avg_fps)
            self.clock.tick(FPS)

        pygame.quit()

    # --------------------------------- Input ----------------------------------------

    def handle_key(self, key: int) -> bool:
        """Apply a key press; returns False when the player asked to quit."""
        state = self.engine.state
        if key == pygame.K_ESCAPE:
            return False
        if key == pygame.K_p:
            self.toggle_pause()
        elif key == pygame.K_m:
            self.toggle_mute()
        elif key == pygame.K_f:
            self.show_fps = not self.show_fps
        elif key in (pygame.K_SPACE, pygame.K_RETURN) and state is GameState.ROUND_END:
            self.next_round()
        elif key == pygame.K_r and state in (GameState.WIN, GameState.GAMEOVER):
            self.start_game()
        return True

    def handle_click(self, pos: tuple[int, int]) -> None:
        """Left click fires while playing, or presses the overlay button otherwise."""
        if self.engine.state is GameState.PLAYING:
            if not self.paused:
                self.engine.fire(*pos)
            return
        if self.start_button_rect().collidepoint(pos):
            self.overlay_action()

    def process_events(self) -> None:
        """Forward engine events to the log and the speakers."""
        for event in self.engine.drain_events():
            self.logger.log_event(event)
            if event.kind == "fire":
                self.play(self.snd_fire)
            elif event.kind in ("kill", "impact"):
                self.play(self.snd_boom)

    # --------------------------------- Rendering ------------------------------------

    def draw(self, fps: float) -> None:
        """
        Compose the frame: playfield → HUD → hint → overlay.

        Parameters
        ----------
        fps : float
            Current frames per second for display
        """
        snap = self.engine.snapshot()
        self.playfield.draw(self.screen, snap, pygame.time.get_ticks(), self.background_img)

        self.hud.draw(self.screen, snap, self.show_fps, fps, self.paused, self.muted)

        if snap.state is GameState.PLAYING:
            hint_text = "[LMB] fire | [P] pause | [F] fps | [M] mute | [ESC] quit"
            hint = self.font_small.render(hint_text, True, (200, 200, 200))
            hint_rect = hint.get_rect(center=(self.current_width // 2, HUD_PADDING + hint.get_height() // 2))
            self.screen.blit(hint, hint_rect)

        self.overlay.draw(self.screen, snap, pygame.mouse.get_pos())
        pygame.display.flip()


def main() -> None:
    Game().run()


if __name__ == "__main__":
    main()
