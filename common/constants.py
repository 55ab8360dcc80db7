"""Shared constants for lattice generation and colouring."""

# Hilbert curve
CURVE_DIMENSIONS: int = 3
DEFAULT_CURVE_BITS: int = 8

# Colour channels
CHANNEL_MAX: int = 255
CHANNEL_MASK: int = 0xFF
# Largest number of coordinate values per axis that still fits an 8-bit channel
MAX_COLOR_SIZE: int = 256

# Output naming
DEFAULT_FILENAME_TEMPLATE: str = "img-{scale}-{seed}.png"
