
from PyQt6.QtGui import QColor

# Keyboard / layout
KEY_WIDTH = 40
KEY_HEIGHT = 160
NUM_KEYS = 25
START_MIDI = 48
SYMMETRIC_OCTAVE_WIDTH = 480
SYMMETRIC_HEIGHT = 240
VIEW_MARGIN = 16

# Tonic / labels
DEFAULT_TONIC = 60
INTERVAL_NAMES = [
    "P1", "m2", "M2", "m3", "M3", "P4", "TT", "P5", "m6", "M6", "m7", "M7", "P8"
]

# Diatonic key colors
WHITE_KEY_COLOR = QColor(255, 255, 255)
BLACK_KEY_COLOR = QColor(0, 0, 0)
BORDER_COLOR = QColor(0, 0, 0)
TRITONE_FRAME_COLOR = QColor(0, 0, 0)
TRITONE_FRAME_WIDTH = 2

# Brightness deltas (HSB, 0..1)
PRESSED_DELTA_NATURAL = -0.3      # white keys darken when pressed
PRESSED_DELTA_ACCIDENTAL = 0.3    # black keys lighten when pressed
INTERVALLIC_PRESSED_DELTA = -0.2
SUBTLE_BIAS = 0.1
SYMBOL_ACTIVE_DELTA = 0.2
SYMBOL_IDLE_DELTA = -0.1
OUTLINE_ACTIVE_DELTA = 0.1

# Geometry ratios
SMALL_KEY_SYMBOL_SCALE = 1.25
SMALL_KEY_SYMBOL_DROP = 0.3
NATURAL_KEY_SYMBOL_DROP = 0.2
SPLIT_SYMBOL_SPREAD = 0.25
CORNER_RADIUS_RATIO = 0.125
FONT_SIZE_RATIO = 0.333
SMALL_KEY_SIDE_INSET = 0.1
DOOR_HEIGHT_RATIO = 0.4
DOOR_WIDTH_RATIO = 0.2
TRITONE_HEIGHT_RATIO = 0.3125
TRITONE_WIDTH_RATIO = 1.0
GOLDEN_RATIO = (1.0 + 5 ** 0.5) / 2

# Palettes, indexed by interval class (P1 .. M7)
HOMEY_KEY_COLORS = [
    "#f2efe6", "#d9534f", "#f0ad4e", "#5b8fd1", "#e8c547", "#7fb069",
    "#9b59b6", "#6fa8dc", "#c0392b", "#f5b041", "#3b6ea5", "#e67e22",
]
HOMEY_SYMBOL_COLORS = [
    "#3d2b1f", "#fbe3e2", "#5a3d0c", "#e4edf8", "#4a3b06", "#eaf3e4",
    "#f1e3f6", "#0f2f4d", "#fcebea", "#4e3506", "#dfe9f4", "#4b2406",
]
PASTEL_KEY_COLORS = [
    "#ffffff", "#ffd1dc", "#ffe5b4", "#cde7f0", "#fff5ba", "#d4f0c8",
    "#e3d0f5", "#c9e4ff", "#ffc8c8", "#ffe0a8", "#c4d7f2", "#ffd8b1",
]
PASTEL_SYMBOL_COLORS = [
    "#5e5e5e", "#b2455f", "#b0772d", "#3f7f99", "#a69222", "#4f8a3c",
    "#7a4fa8", "#3a72b0", "#a83a3a", "#a8782a", "#3d5e94", "#b26a2c",
]
MONO_KEY_COLORS = [
    "#ffffff", "#4d4d4d", "#b3b3b3", "#666666", "#cccccc", "#e6e6e6",
    "#333333", "#e6e6e6", "#595959", "#bfbfbf", "#737373", "#a6a6a6",
]
MONO_SYMBOL_COLORS = [
    "#000000", "#e6e6e6", "#262626", "#f2f2f2", "#1a1a1a", "#4d4d4d",
    "#ffffff", "#4d4d4d", "#f2f2f2", "#1a1a1a", "#ffffff", "#0d0d0d",
]
