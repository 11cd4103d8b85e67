"""ThumbHash format constants."""

MIN_HASH = 5
MAX_HASH = 25

MAX_RGBA_WIDTH = 100
MAX_RGBA_HEIGHT = 100

# Longest side of a decoded placeholder
MAX_THUMB_SIZE = 32

# Luminance grid limits (fewer luminance terms when alpha is present)
L_LIMIT_OPAQUE = 7
L_LIMIT_ALPHA = 5

# Fixed grids for chroma and alpha
PQ_GRID = (3, 3)
ALPHA_GRID = (5, 5)
MIN_L_GRID = 3

# Header quantization levels
L_DC_LEVELS = 63.0
PQ_DC_HALF = 31.5
L_SCALE_LEVELS = 31.0
PQ_SCALE_LEVELS = 63.0
NIBBLE_LEVELS = 15.0
NIBBLE_HALF = 7.5

# Decode-only chroma saturation boost (compensates for quantization)
SATURATION_BOOST = 1.25
