"""Card geometry shared by every part of the renderer."""

# Canonical card size in card-space pixels
CARD_WIDTH = 630
CARD_HEIGHT = 880

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Mask punched out of the border and frame so the artwork shows through
ART_WINDOW_MASK_ID = "artWindowMask"
