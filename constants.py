# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework
and the comet's look. These are not expected to change between runs; anything
tunable per run lives in config.json.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Screen dimensions
WIDTH = 1600  # Pixels
HEIGHT = 900  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# Window Title
TITLE = "Comet Simulator"

# --- Comet Motion ---
DECELERATION_DISTANCE = 10.0  # Pixels. Upper bound of the slow-down zone near the target.
DECELERATION_RATE = 0.1       # Fraction of remaining distance covered per frame while slowing.
ARRIVAL_EPSILON = 0.01        # Pixels. Closer than this counts as arrived.

# --- Comet Head ---
# Concentric layers, outer to inner: (diameter as a multiple of size, grey level).
HEAD_LAYERS = (
    (2.6, 50),   # Outer halo
    (1.8, 150),  # Mid glow
    (0.9, 255),  # Solid core
)

# --- Comet Tail ---
# All lengths are multiples of the comet's current size.
TAIL_LENGTH_FACTOR = 8.0
TAIL_BASE_WIDTH_FACTOR = 0.6
TAIL_TIP_WIDTH_FACTOR = 0.1
TAIL_OFFSET_FACTOR = 0.5  # Gap between head centre and tail base.
TAIL_SEGMENTS = 20
TAIL_COLOR = WHITE

# Visual Effects
TRAIL_EFFECT_COLOR = (0, 0, 0, 60) # RGBA. Alpha controls trail length (lower = longer).

# Bloom effect settings
BLOOM_RADIUS = 12 # The radius of the glow effect in pixels. Larger is more diffuse.
BLOOM_INTENSITY = 90 # The brightness of the glow (0-255).

# --- Comet Field ---
MIN_JOURNEY_DISTANCE = 100.0  # Pixels. Keeps the slow-down zone at its full DECELERATION_DISTANCE.
TARGET_SAMPLE_ATTEMPTS = 50
