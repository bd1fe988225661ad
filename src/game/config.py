import os

# --- Display ---
WIDTH = 800
HEIGHT = 600
FPS = 60

# --- World / Physics (per tick, one tick = one frame) ---
SCROLL_SPEED = 4.0          # world scroll speed (px/tick)
GRAVITY = 0.8               # downward acceleration (px/tick^2)
JUMP_POWER = -18.0          # vertical velocity set on jump (px/tick)
GROUND_Y = 450              # ground baseline support height (player top)

# --- Player ---
PLAYER_X = 200              # player's fixed x (world scrolls left)
PLAYER_W = 120
PLAYER_H = 100

# --- Platforms ---
PLATFORM_W = 150
PLATFORM_H = 80
PLATFORM_TARGET = 12        # spawner keeps at most this many alive
PLATFORM_SPACING = 120      # last platform must be left of WIDTH - spacing to spawn
PLATFORM_SPAWN_JITTER = 80
PLATFORM_INITIAL_X = 300
PLATFORM_INITIAL_STEP = 160

# Tier bands, half-open [lo, hi)
TIER_HIGH = (280, 320)
TIER_MID = (340, 380)
TIER_LOW = (380, 420)

# --- Landing ---
LANDING_INSET = 10          # px shaved off each side of the player box
LANDING_BAND = 25           # foot may sit this far below a platform top and still land
STANDING_TOLERANCE = 5

# --- Collectibles ---
COLLECTIBLE_W = 60
COLLECTIBLE_H = 60
COLLECTIBLE_TARGET = 10
COLLECTIBLE_INITIAL = 8
COLLECTIBLE_SPACING = 200
COLLECTIBLE_SPAWN_JITTER = 150
COLLECTIBLE_Y_MIN = 200
COLLECTIBLE_Y_SPAN = 150
COLLECTIBLE_INITIAL_X = 350
COLLECTIBLE_INITIAL_STEP = 200
COLLECTIBLE_REWARD = 10
BOB_SPEED = 0.1             # radians per tick
BOB_AMPLITUDE = 5

# --- Background decorations (parallax) ---
DECORATION_COUNT = 8
DECORATION_Y_MIN, DECORATION_Y_SPAN = 50, 100
DECORATION_W_MIN, DECORATION_W_SPAN = 100, 50
DECORATION_H_MIN, DECORATION_H_SPAN = 50, 30
DECORATION_SPEED_MIN, DECORATION_SPEED_SPAN = 0.5, 1.5
DECORATION_OPACITY_MIN, DECORATION_OPACITY_SPAN = 0.3, 0.4
DECORATION_RESPAWN_JITTER = 200

SEED_DEFAULT = 12345

# --- Assets ---
_BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
ASSET_DIR = os.getenv('UD_ASSET_DIR', os.path.join(_BASE_DIR, 'assets'))
ASSET_FILES = {
    'unicorn': 'unicorn.png',
    'cloud': 'cloud.png',
    'rainbow': 'rainbow.png',
}

# --- Environment Toggles ---
STRICT_ASSETS = os.getenv('UD_STRICT_ASSETS', '0') != '0'
LOG_LEVEL = os.getenv('UD_LOG_LEVEL', 'INFO')

# --- Colors (RGB) ---
COLOR_SKY = (135, 206, 235)
COLOR_MEADOW = (152, 251, 152)
COLOR_GRASS = (34, 139, 34)
COLOR_GRASS_LINE = (50, 205, 50)
COLOR_SHADOW = (0, 0, 0, 51)
COLOR_HUD = (40, 40, 60)
COLOR_PLAYER = (255, 240, 250)
COLOR_MANE = (200, 120, 255)
COLOR_CLOUD = (250, 250, 255)
COLOR_RAINBOW = ((255, 90, 90), (255, 190, 60), (255, 240, 90),
                 (110, 220, 110), (90, 160, 255), (170, 110, 230))
