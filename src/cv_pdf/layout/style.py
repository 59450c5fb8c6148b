"""Typography and colour constants shared by the section renderers."""

from __future__ import annotations

# Font sizes (layout units)
NAME_SIZE = 20
TITLE_SIZE = 12
HEADING_SIZE = 11
BODY_SIZE = 10
CONTACT_SIZE = 10
LINK_ROW_SIZE = 9
META_SIZE = 8

# RGB 0-255
ACCENT = (5, 150, 105)  # #059669
GRAY = (71, 85, 105)  # #475569
LIGHT_GRAY = (148, 163, 184)  # #94a3b8

RULE_THICKNESS = 0.5

# Helvetica bullet advance, in em (AFM width 350/1000).
BULLET_ADVANCE_EM = 0.35
# Spaces drawn on each side of a bullet glyph.
BULLET_GAP_SPACES = 2

# Link rectangle extents relative to the text baseline.
LINK_DESCENT = 2
LINK_ASCENT_RATIO = 0.9
