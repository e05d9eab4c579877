"""Global constants for stencil generation. All lengths in mm."""

# Pad Geometry
SHRINK_WIDTH = 0.05
"""Inset applied to every side of a paste opening before cutting."""

MIN_CORNER_RADIUS = 0.1
"""Smallest corner cut made on a rounded pad."""

# Frame
FRAME_WIDTH = 100.0
"""Width of the optional stencil frame."""

FRAME_HEIGHT = 80.0
"""Height of the optional stencil frame."""

FRAME_KERF = 0.2
"""Cutter kerf added to both frame dimensions."""

MITRE_LENGTH = 5.0
"""Length of each mitred frame corner."""

# DXF Output
DXF_LAYER = "0"
DXF_COLOR = 7
TEXT_HEIGHT = 0.5
"""Height of pad annotation text."""

TOP_SUFFIX = "top-cream"
BOTTOM_SUFFIX = "bottom-cream"
DXF_EXTENSION = ".dxf"
