"""RGBA colour types, HSV conversion and a palette of named colours."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

_CHANNEL_ORDER = ("a", "r", "g", "b")


def _byte(value: float) -> int:
    """Truncate a scaled float channel to a byte, clamping to 0..255."""
    return min(255, max(0, int(value)))


@dataclass(frozen=True)
class Color32:
    """An RGBA colour with byte channels in the range 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in _CHANNEL_ORDER:
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name}={value} is outside 0..255")

    @classmethod
    def from_packed(cls, packed: int) -> Color32:
        """Unpack a 32-bit value laid out as 0xAABBGGRR."""
        return cls(
            r=packed & 0xFF,
            g=(packed >> 8) & 0xFF,
            b=(packed >> 16) & 0xFF,
            a=(packed >> 24) & 0xFF,
        )

    @classmethod
    def from_colorf(cls, color: Colorf) -> Color32:
        """Convert a float colour by scaling each channel by 255."""
        return cls(
            r=_byte(color.r * 255),
            g=_byte(color.g * 255),
            b=_byte(color.b * 255),
            a=_byte(color.a * 255),
        )

    @classmethod
    def random_color(cls, minimum: int = 0, maximum: int = 0) -> Color32:
        """An opaque colour whose r, g, b are drawn from minimum..maximum inclusive."""
        return cls(
            r=random.randint(minimum, maximum),
            g=random.randint(minimum, maximum),
            b=random.randint(minimum, maximum),
            a=255,
        )

    def __getitem__(self, index: int) -> int:
        """Channels by index: 0 alpha, 1 red, 2 green, 3 blue."""
        if index < 0 or index > 4:
            raise IndexError("Out of color range")
        if index == 4:
            return self.a
        return getattr(self, _CHANNEL_ORDER[index])

    def light(self) -> Color32:
        """Halfway between this colour and white, fully opaque."""
        return Color32((self.r + 255) // 2, (self.g + 255) // 2, (self.b + 255) // 2)

    def dark(self) -> Color32:
        """Half the intensity of this colour, fully opaque."""
        return Color32(self.r // 2, self.g // 2, self.b // 2)


@dataclass
class Colorf:
    """An RGBA colour with float channels nominally in the range 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_packed(cls, packed: int) -> Colorf:
        """Unpack a 32-bit value; blue is read from the same byte as green."""
        a = ((packed >> 24) & 0xFF) / 255
        r = ((packed >> 16) & 0xFF) / 255
        g = ((packed >> 8) & 0xFF) / 255
        return cls(r=r, g=g, b=g, a=a)

    @classmethod
    def from_color32(cls, color: Color32) -> Colorf:
        """Convert a byte colour by dividing each channel by 255."""
        return cls(
            r=color.r / 255.0,
            g=color.g / 255.0,
            b=color.b / 255.0,
            a=color.a / 255.0,
        )


def hsv_to_rgb(h: float, s: float, v: float, hdr: bool = True) -> Colorf:
    """Create an opaque RGB colour from hue, saturation and value.

    Without ``hdr`` the resulting channels are clamped to 0..1.
    """
    if s == 0.0:
        return Colorf(v, v, v)
    if v == 0.0:
        return Colorf(0.0, 0.0, 0.0)

    f = h * 6.0
    sector = math.floor(f)
    fraction = f - sector
    p = v * (1.0 - s)
    q = v * (1.0 - s * fraction)
    t = v * (1.0 - s * (1.0 - fraction))

    table = {
        -1: (v, p, q),
        0: (v, t, p),
        1: (q, v, p),
        2: (p, v, t),
        3: (p, q, v),
        4: (t, p, v),
        5: (v, p, q),
        6: (v, t, p),
    }
    try:
        r, g, b = table[sector]
    except KeyError:
        raise ValueError(f"hue {h} is outside the supported range") from None

    if not hdr:
        r, g, b = (min(1.0, max(0.0, c)) for c in (r, g, b))
    return Colorf(r, g, b)


def _rgb_to_hsv_helper(
    offset: float, dominant: float, one: float, two: float
) -> tuple[float, float, float]:
    v = dominant
    if v == 0.0:
        return 0.0, 0.0, v
    smallest = one if one <= two else two
    spread = v - smallest
    if spread != 0.0:
        s = spread / v
        h = offset + (one - two) / spread
    else:
        s = 0.0
        h = offset + (one - two)
    h /= 6.0
    if h < 0.0:
        h += 1.0
    return h, s, v


def rgb_to_hsv(color: Colorf) -> tuple[float, float, float]:
    """Return the (hue, saturation, value) of a colour, each in 0..1."""
    if color.b > color.g and color.b > color.r:
        return _rgb_to_hsv_helper(4.0, color.b, color.r, color.g)
    if color.g > color.r:
        return _rgb_to_hsv_helper(2.0, color.g, color.b, color.r)
    return _rgb_to_hsv_helper(0.0, color.r, color.g, color.b)


TRANSPARENT_BLACK = Color32.from_packed(0)
TRANSPARENT = Color32.from_packed(0)
ALICE_BLUE = Color32.from_packed(0xFFFFF8F0)
ANTIQUE_WHITE = Color32.from_packed(0xFFD7EBFA)
AQUA = Color32.from_packed(0xFFFFFF00)
AQUAMARINE = Color32.from_packed(0xFFD4FF7F)
AZURE = Color32.from_packed(0xFFFFFFF0)
BEIGE = Color32.from_packed(0xFFDCF5F5)
BISQUE = Color32.from_packed(0xFFC4E4FF)
BLACK = Color32.from_packed(0xFF000000)
BLANCHED_ALMOND = Color32.from_packed(0xFFCDEBFF)
BLUE = Color32.from_packed(0xFFFF0000)
BLUE_VIOLET = Color32.from_packed(0xFFE22B8A)
BROWN = Color32.from_packed(0xFF2A2AA5)
BURLY_WOOD = Color32.from_packed(0xFF87B8DE)
CADET_BLUE = Color32.from_packed(0xFFA09E5F)
CHARTREUSE = Color32.from_packed(0xFF00FF7F)
CHOCOLATE = Color32.from_packed(0xFF1E69D2)
CORAL = Color32.from_packed(0xFF507FFF)
CORNFLOWER_BLUE = Color32.from_packed(0xFFED9564)
CORNSILK = Color32.from_packed(0xFFDCF8FF)
CRIMSON = Color32.from_packed(0xFF3C14DC)
CYAN = Color32.from_packed(0xFFFFFF00)
DARK_BLUE = Color32.from_packed(0xFF8B0000)
DARK_CYAN = Color32.from_packed(0xFF8B8B00)
DARK_GOLDENROD = Color32.from_packed(0xFF0B86B8)
DARK_GRAY = Color32.from_packed(0xFFA9A9A9)
DARK_GREEN = Color32.from_packed(0xFF006400)
DARK_KHAKI = Color32.from_packed(0xFF6BB7BD)
DARK_MAGENTA = Color32.from_packed(0xFF8B008B)
DARK_OLIVE_GREEN = Color32.from_packed(0xFF2F6B55)
DARK_ORANGE = Color32.from_packed(0xFF008CFF)
DARK_ORCHID = Color32.from_packed(0xFFCC3299)
DARK_RED = Color32.from_packed(0xFF00008B)
DARK_SALMON = Color32.from_packed(0xFF7A96E9)
DARK_SEA_GREEN = Color32.from_packed(0xFF8BBC8F)
DARK_SLATE_BLUE = Color32.from_packed(0xFF8B3D48)
DARK_SLATE_GRAY = Color32.from_packed(0xFF4F4F2F)
DARK_TURQUOISE = Color32.from_packed(0xFFD1CE00)
DARK_VIOLET = Color32.from_packed(0xFFD30094)
DEEP_PINK = Color32.from_packed(0xFF9314FF)
DEEP_SKY_BLUE = Color32.from_packed(0xFFFFBF00)
DIM_GRAY = Color32.from_packed(0xFF696969)
DODGER_BLUE = Color32.from_packed(0xFFFF901E)
FIREBRICK = Color32.from_packed(0xFF2222B2)
FLORAL_WHITE = Color32.from_packed(0xFFF0FAFF)
FOREST_GREEN = Color32.from_packed(0xFF228B22)
FUCHSIA = Color32.from_packed(0xFFFF00FF)
GAINSBORO = Color32.from_packed(0xFFDCDCDC)
GHOST_WHITE = Color32.from_packed(0xFFFFF8F8)
GOLD = Color32.from_packed(0xFF00D7FF)
GOLDENROD = Color32.from_packed(0xFF20A5DA)
GRAY = Color32.from_packed(0xFF808080)
GREEN = Color32.from_packed(0xFF008000)
GREEN_YELLOW = Color32.from_packed(0xFF2FFFAD)
HONEYDEW = Color32.from_packed(0xFFF0FFF0)
HOT_PINK = Color32.from_packed(0xFFB469FF)
INDIAN_RED = Color32.from_packed(0xFF5C5CCD)
INDIGO = Color32.from_packed(0xFF82004B)
IVORY = Color32.from_packed(0xFFF0FFFF)
KHAKI = Color32.from_packed(0xFF8CE6F0)
LAVENDER = Color32.from_packed(0xFFFAE6E6)
LAVENDER_BLUSH = Color32.from_packed(0xFFF5F0FF)
LAWN_GREEN = Color32.from_packed(0xFF00FC7C)
LEMON_CHIFFON = Color32.from_packed(0xFFCDFAFF)
LIGHT_BLUE = Color32.from_packed(0xFFE6D8AD)
LIGHT_CORAL = Color32.from_packed(0xFF8080F0)
LIGHT_CYAN = Color32.from_packed(0xFFFFFFE0)
LIGHT_GOLDENROD_YELLOW = Color32.from_packed(0xFFD2FAFA)
LIGHT_GRAY = Color32.from_packed(0xFFD3D3D3)
LIGHT_GREEN = Color32.from_packed(0xFF90EE90)
LIGHT_PINK = Color32.from_packed(0xFFC1B6FF)
LIGHT_SALMON = Color32.from_packed(0xFF7AA0FF)
LIGHT_SEA_GREEN = Color32.from_packed(0xFFAAB220)
LIGHT_SKY_BLUE = Color32.from_packed(0xFFFACE87)
LIGHT_SLATE_GRAY = Color32.from_packed(0xFF998877)
LIGHT_STEEL_BLUE = Color32.from_packed(0xFFDEC4B0)
LIGHT_YELLOW = Color32.from_packed(0xFFE0FFFF)
LIME = Color32.from_packed(0xFF00FF00)
LIME_GREEN = Color32.from_packed(0xFF32CD32)
LINEN = Color32.from_packed(0xFFE6F0FA)
MAGENTA = Color32.from_packed(0xFFFF00FF)
MAROON = Color32.from_packed(0xFF000080)
MEDIUM_AQUAMARINE = Color32.from_packed(0xFFAACD66)
MEDIUM_BLUE = Color32.from_packed(0xFFCD0000)
MEDIUM_ORCHID = Color32.from_packed(0xFFD355BA)
MEDIUM_PURPLE = Color32.from_packed(0xFFDB7093)
MEDIUM_SEA_GREEN = Color32.from_packed(0xFF71B33C)
MEDIUM_SLATE_BLUE = Color32.from_packed(0xFFEE687B)
MEDIUM_SPRING_GREEN = Color32.from_packed(0xFF9AFA00)
MEDIUM_TURQUOISE = Color32.from_packed(0xFFCCD148)
MEDIUM_VIOLET_RED = Color32.from_packed(0xFF8515C7)
MIDNIGHT_BLUE = Color32.from_packed(0xFF701919)
MINT_CREAM = Color32.from_packed(0xFFFAFFF5)
MISTY_ROSE = Color32.from_packed(0xFFE1E4FF)
MOCCASIN = Color32.from_packed(0xFFB5E4FF)
NAVAJO_WHITE = Color32.from_packed(0xFFADDEFF)
NAVY = Color32.from_packed(0xFF800000)
OLD_LACE = Color32.from_packed(0xFFE6F5FD)
OLIVE = Color32.from_packed(0xFF008080)
OLIVE_DRAB = Color32.from_packed(0xFF238E6B)
ORANGE = Color32.from_packed(0xFF00A5FF)
ORANGE_RED = Color32.from_packed(0xFF0045FF)
ORCHID = Color32.from_packed(0xFFD670DA)
PALE_GOLDENROD = Color32.from_packed(0xFFAAE8EE)
PALE_GREEN = Color32.from_packed(0xFF98FB98)
PALE_TURQUOISE = Color32.from_packed(0xFFEEEEAF)
PALE_VIOLET_RED = Color32.from_packed(0xFF9370DB)
PAPAYA_WHIP = Color32.from_packed(0xFFD5EFFF)
PEACH_PUFF = Color32.from_packed(0xFFB9DAFF)
PERU = Color32.from_packed(0xFF3F85CD)
PINK = Color32.from_packed(0xFFCBC0FF)
PLUM = Color32.from_packed(0xFFDDA0DD)
POWDER_BLUE = Color32.from_packed(0xFFE6E0B0)
PURPLE = Color32.from_packed(0xFF800080)
RED = Color32.from_packed(0xFF0000FF)
ROSY_BROWN = Color32.from_packed(0xFF8F8FBC)
ROYAL_BLUE = Color32.from_packed(0xFFE16941)
SADDLE_BROWN = Color32.from_packed(0xFF13458B)
SALMON = Color32.from_packed(0xFF7280FA)
SANDY_BROWN = Color32.from_packed(0xFF60A4F4)
SEA_GREEN = Color32.from_packed(0xFF578B2E)
SEA_SHELL = Color32.from_packed(0xFFEEF5FF)
SIENNA = Color32.from_packed(0xFF2D52A0)
SILVER = Color32.from_packed(0xFFC0C0C0)
SKY_BLUE = Color32.from_packed(0xFFEBCE87)
SLATE_BLUE = Color32.from_packed(0xFFCD5A6A)
SLATE_GRAY = Color32.from_packed(0xFF908070)
SNOW = Color32.from_packed(0xFFFAFAFF)
SPRING_GREEN = Color32.from_packed(0xFF7FFF00)
STEEL_BLUE = Color32.from_packed(0xFFB48246)
TAN = Color32.from_packed(0xFF8CB4D2)
TEAL = Color32.from_packed(0xFF808000)
THISTLE = Color32.from_packed(0xFFD8BFD8)
TOMATO = Color32.from_packed(0xFF4763FF)
TURQUOISE = Color32.from_packed(0xFFD0E040)
VIOLET = Color32.from_packed(0xFFEE82EE)
WHEAT = Color32.from_packed(0xFFB3DEF5)
WHITE = Color32.from_packed(0xFFFFFFFF)
WHITE_SMOKE = Color32.from_packed(0xFFF5F5F5)
YELLOW = Color32.from_packed(0xFF00FFFF)
YELLOW_GREEN = Color32.from_packed(0xFF32CD9A)