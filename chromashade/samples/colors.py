# RED
RED_SRGB24 = (255, 0, 0)
RED_HSV = (0.0, 1.0, 1.0)

# GREEN
GREEN_SRGB24 = (0, 255, 0)
GREEN_HSV = (120.0, 1.0, 1.0)

# BLUE
BLUE_SRGB24 = (0, 0, 255)
BLUE_HSV = (240.0, 1.0, 1.0)

# YELLOW
YELLOW_SRGB24 = (255, 255, 0)
YELLOW_HSV = (60.0, 1.0, 1.0)

# MAGENTA
MAGENTA_SRGB24 = (255, 0, 255)
MAGENTA_HSV = (300.0, 1.0, 1.0)

# CYAN
CYAN_SRGB24 = (0, 255, 255)
CYAN_HSV = (180.0, 1.0, 1.0)

# WHITE
WHITE_SRGB24 = (255, 255, 255)
WHITE_HSV = (0.0, 0.0, 1.0)

# BLACK
BLACK_SRGB24 = (0, 0, 0)
BLACK_HSV = (0.0, 0.0, 0.0)

# (srgb24, hsv in degrees/unit) pairs for parametrized tests
PRIMARY_SAMPLES = [
    (RED_SRGB24, RED_HSV),
    (GREEN_SRGB24, GREEN_HSV),
    (BLUE_SRGB24, BLUE_HSV),
    (YELLOW_SRGB24, YELLOW_HSV),
    (MAGENTA_SRGB24, MAGENTA_HSV),
    (CYAN_SRGB24, CYAN_HSV),
    (WHITE_SRGB24, WHITE_HSV),
    (BLACK_SRGB24, BLACK_HSV),
]

# 24-bit colors spread over 0..=0xFFFFFF, plus the corners
HEX_SAMPLES = [0x000000, 0xFFFFFF, 0x808080, 0x7F7F7F, 0x010203] + list(range(0, 0x1000000, 0x013579))


def srgb24_from_int(value: int):
    """Split ``0xRRGGBB`` into ``(r, g, b)``."""
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
