"""Constants shared by the collection and the renderer.

Domain defaults mirror the machine integer range; symbols are the fixed
alphabet of the textual diagram.
"""

import sys

# Default domain
DEFAULT_MIN_LOW = 0
DEFAULT_MAX_HIGH = sys.maxsize

# Diagram alphabet
EMPTY_SYMBOL = "◌"
FULL_SYMBOL = "◎"
OVERLAP_SYMBOL = "●"
SEPARATOR = "║"
LEFT_FRAME = "╠"
RIGHT_FRAME = "╣"

# Units between separators
BLOCK_SIZE = 10
