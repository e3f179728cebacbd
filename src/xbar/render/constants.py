"""Render constants used across render modules.

Pixel defaults for the crossbar drawing. Colours and fonts live in
style.py themes; these are the defaults of ``GridMetrics``.
"""

# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------
BLOCK_WIDTH: int = 20
"""Width of one wiring column."""

BLOCK_HEIGHT: int = 20
"""Height of one row. Also used as the label font size."""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
MARGIN_X: int = 40
"""Horizontal margin between the canvas border and the labels."""

MARGIN_Y: int = 40
"""Vertical margin above the first row and below the last."""

LABEL_PAD: int = 30
"""Space reserved for terminal labels left of the wires."""

# ---------------------------------------------------------------------------
# Text chart
# ---------------------------------------------------------------------------
TEXT_ENDPOINT: str = "+"
"""Cell marking a wire endpoint."""

TEXT_WIRE: str = "|"
"""Cell inside a wire's span."""

TEXT_EMPTY: str = " "
"""Unused cell."""
