"""Game-wide constants for Starry Defense.

Screen dimensions, colors, font sizes, tuning knobs for spawning, scoring,
explosions and layout, asset paths, and logging configuration.
"""

import os

WIDTH, HEIGHT = 960, 540           # 16:9 playfield
FPS = 60                           # target frame rate
FRAME_MS = 16.67                   # one nominal frame; dt == 1.0
MAX_FRAME_DT = 4.0                 # longest frame integrated in one tick

BG_COLOR = (5, 6, 14)              # night sky
TEXT_COLOR = (235, 235, 235)
ACCENT_COLOR = (74, 158, 255)      # cities, buttons
GOLD_COLOR = (250, 204, 21)
DANGER_COLOR = (239, 68, 68)
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 16
FONT_SIZE_LARGE = 22
FONT_SIZE_TITLE = 48

# Scoring
WIN_SCORE = 1000
POINTS_PER_ROCKET = 20
MISSILE_BONUS = 5                  # per missile left at round end

# Explosions
EXPLOSION_START_RADIUS = 2
EXPLOSION_MAX_RADIUS = 40
EXPLOSION_GROWTH = 1.5
EXPLOSION_SHRINK_FACTOR = 0.5      # shrink rate relative to growth

# Spawning
BASE_ENEMIES = 10
ENEMIES_PER_ROUND = 5
BASE_SPAWN_INTERVAL = 80           # nominal frames between rockets
SPAWN_INTERVAL_DECREASE = 8        # per round
MIN_SPAWN_INTERVAL = 15
BASE_ENEMY_SPEED = 0.001
ENEMY_SPEED_PER_ROUND = 0.0003
ENEMY_SPEED_MULTIPLIER = 2

# Motion
INTERCEPTOR_SPEED = 0.05
CURVE_EPSILON = 0.0001

# Impact matching
IMPACT_TOLERANCE = 5

# Layout (relative x positions, offsets from the bottom edge)
CITY_POSITIONS = (0.15, 0.25, 0.35, 0.65, 0.75, 0.85)
CITY_GROUND_OFFSET = 40
TURRET_GROUND_OFFSET = 50
TURRET_LAYOUT = (
    ("t-left", 0.05, 20),
    ("t-mid", 0.5, 40),
    ("t-right", 0.95, 20),
)

# Event queue
MAX_PENDING_EVENTS = 256           # oldest undrained events are dropped first

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")
MUSIC_PATH = os.path.join(ASSETS_DIR, "bg_music.mp3")       # optional
FIRE_SFX_PATH = os.path.join(ASSETS_DIR, "fire.wav")        # optional
EXPLOSION_SFX_PATH = os.path.join(ASSETS_DIR, "boom.wav")   # optional
BACKGROUND_PATH = os.path.join(ASSETS_DIR, "background.png")  # optional
