"""Core simulation constants.

All values are per-frame quantities tuned for a fixed 60 Hz step and a
600x600 reference window. `GameConfig.for_window` rescales them.
"""

BASE_WINDOW = 600             # Reference window side in pixels
BASE_GRAVITY = 0.5            # Downward velocity gain per frame (px/frame^2)
BASE_BALL_ACCEL = 0.4         # Horizontal velocity gain per frame of thrust
SCROLL_SPEED = 2.5            # Camera advance per frame in drift mode
FPS = 60                      # Fixed physics rate; no delta-time scaling

SEGMENTS_PER_LEVEL = 8        # Slots per level (K)
LEVELS_VISIBLE = 7            # Levels per window height
LEVEL_HEIGHT = 10             # Platform thickness in pixels
INITIAL_LEVELS = 10           # Levels generated on restart
REMOVAL_MARGIN = 50           # Distance above the viewport before a level is recycled

BALL_START_Y = 100
BALL_RADIUS_FRACTION = 0.2    # Ball radius as a fraction of one slot width
HORIZONTAL_DAMPING = 0.95     # vx multiplier applied every frame
MAX_SPEED_FACTOR = 15         # |vx| is capped at this many thrust increments

MIN_HOLES = 1
MAX_HOLES = 2
