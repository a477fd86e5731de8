FRAMERATE = 60
WIDTH, HEIGHT = 1280, 720
LINE_COUNT = 180
PALETTES = [
    {
        "name": "Deep",
        "bg": "#1A2A38",
        "main": "#4A90E2",
        "subtle": "#2A5D8A",
        "accumulated": "#101A24",
        "puddle_overlay": "#101A24B0",
    },
    {
        "name": "Clear",
        "bg": "#202D3A",
        "main": "#5EADE2",
        "subtle": "#3A6F9E",
        "accumulated": "#151D28",
        "puddle_overlay": "#151D28B0",
    },
]
BACKGROUND_FADE_ALPHA = 2  # out of 255, very thin veil per frame

# --- Motion ---
SMOOTHING = 0.1  # per-frame lerp toward targets
MIN_DROOP_SPEED = 0.05
MAX_DROOP_SPEED = 0.5
MIN_FILL_RATE, MAX_FILL_RATE = -1.0, 2.0
PUDDLE_MARGIN = 100  # puddle may rise this far past the top edge
PUDDLE_DROOP_BOOST = 0.003
SWAY_MIN, SWAY_MAX = 0.1, 0.3
DRIFT_MIN, DRIFT_MAX = 0.5, 3.0
REVERSE_MOMENT_FRAMES = 30
REVERSE_IMPULSE = (5, 15)
REVERSE_JITTER = 0.5

# --- Line shape ---
LINE_LENGTH = (50, 150)
LINE_THICKNESS = (1, 4)
LINE_SPEED_FACTOR = (0.8, 1.2)
LINE_DRIFT = (-0.2, 0.2)
LINE_ANGLE_JITTER = 0.2
MAIN_COLOR_CHANCE = 0.2
RESET_Y = (-100, -50)
BOTTOM_MARGIN = 50
TOP_LIMIT = -150

# --- Overlays ---
WEBCAM_CAPTURE_SIZE = (320, 240)
WEBCAM_BOX_WIDTH = 230
WEBCAM_MARGIN = 20
WEBCAM_BORDER = (74, 144, 226, 100)
INFO_BOX_POS = (20, 20)
INFO_BOX_WIDTH = 230
INFO_BOX_LINES = [
    "Move left / right: droop speed",
    "Move up / down: puddle fill",
    "Click: change the mood",
]
