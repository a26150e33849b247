"""Game-wide constants for Starlanes."""

# --- Display ---
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
TITLE = "Starlanes"

# --- Colors (RGB) ---
WHITE = (255, 255, 255)
BACKGROUND = (10, 10, 10)
DARK_GREY = (30, 30, 40)
LIGHT_GREY = (180, 180, 190)

# HUD / UI accent colors
AMBER = (255, 191, 0)
CYAN = (0, 255, 255)
HIGHLIGHT_YELLOW = (255, 255, 0)

# --- Map colors ---
LANE_COLOR = (68, 68, 68)
SYSTEM_NEUTRAL_FILL = (102, 102, 102)
SYSTEM_PLAYER_FILL = (74, 158, 255)
FLEET_MARKER_COLOR = WHITE

# --- Star type colors (keyed by StarType.value) ---
STAR_COLORS: dict[str, tuple[int, int, int]] = {
    "red_dwarf": (200, 80, 60),
    "yellow": (255, 220, 100),
    "blue_giant": (100, 160, 255),
    "white_dwarf": (230, 230, 250),
}

# --- UI Panel ---
PANEL_BG = (20, 20, 30, 220)
PANEL_BORDER = (60, 60, 80)
PANEL_WIDTH = 300
HUD_HEIGHT = 40

# --- Game Metadata ---
GAME_TITLE = "STARLANES"
GAME_SUBTITLE = "Hold the Lanes"
GAME_VERSION = "0.1.0"

# --- Galaxy map interaction ---
SYSTEM_RADIUS = 15  # World units
SELECTION_RADIUS = 15  # World units
MIN_ZOOM = 0.3
MAX_ZOOM = 2.0
ZOOM_STEP = 1.1
DRAG_THRESHOLD_PX = 5
INERTIA_DECAY = 0.92  # Velocity multiplier per frame
INERTIA_MIN_SPEED = 0.02  # World units per ms

# --- Fleet travel (ms) ---
TRAVEL_MS_PER_UNIT = 8
MIN_TRAVEL_MS = 1500
MAX_TRAVEL_MS = 6000

# --- Dev galaxy ---
DEV_PLAYER_ID = "player"
DEV_PLAYER_COLOR = "#4a9eff"
