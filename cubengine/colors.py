"""Named colours and conversion of 0xRRGGBB values to visual pixel values."""

from __future__ import annotations

import re
from typing import NamedTuple

# Each entry holds a colour value followed by the names that select it.
# When a name appears twice, the first value wins.
_NAMED: tuple[tuple, ...] = (
    (0xFFFAFA, "snow"),
    (0xF8F8FF, "ghost white", "ghostwhite"),
    (0xF5F5F5, "white smoke", "whitesmoke"),
    (0xDCDCDC, "gainsboro"),
    (0xFFFAF0, "floral white", "floralwhite"),
    (0xFDF5E6, "old lace", "oldlace"),
    (0xFAF0E6, "linen"),
    (0xFAEBD7, "antique white", "antiquewhite"),
    (0xFFEFD5, "papaya whip", "papayawhip"),
    (0xFFEBCD, "blanched almond", "blanchedalmond"),
    (0xFFE4C4, "bisque"),
    (0xFFDAB9, "peach puff", "peachpuff"),
    (0xFFDEAD, "navajo white", "navajowhite"),
    (0xFFE4B5, "moccasin"),
    (0xFFF8DC, "cornsilk"),
    (0xFFFFF0, "ivory"),
    (0xFFFACD, "lemon chiffon", "lemonchiffon"),
    (0xFFF5EE, "seashell"),
    (0xF0FFF0, "honeydew"),
    (0xF5FFFA, "mint cream", "mintcream"),
    (0xF0FFFF, "azure"),
    (0xF0F8FF, "alice blue", "aliceblue"),
    (0xE6E6FA, "lavender"),
    (0xFFF0F5, "lavender blush", "lavenderblush"),
    (0xFFE4E1, "misty rose", "mistyrose"),
    (0xFFFFFF, "white"),
    (0x000000, "black"),
    (0x2F4F4F, "dark slate", "darkslategray", "darkslategrey"),
    (0x696969, "dim gray", "dimgray", "dim grey", "dimgrey"),
    (0x708090, "slate gray", "slategray", "slate grey", "slategrey"),
    (0x778899, "light slate", "lightslategray", "lightslategrey"),
    (0xBEBEBE, "gray", "grey"),
    (0xD3D3D3, "light grey", "lightgrey", "light gray", "lightgray"),
    (0x191970, "midnight blue", "midnightblue"),
    (0x000080, "navy", "navy blue", "navyblue"),
    (0x6495ED, "cornflower blue", "cornflowerblue"),
    (0x483D8B, "dark slate", "darkslateblue"),
    (0x6A5ACD, "slate blue", "slateblue"),
    (0x7B68EE, "medium slate", "mediumslateblue"),
    (0x8470FF, "light slate", "lightslateblue"),
    (0x0000CD, "medium blue", "mediumblue"),
    (0x4169E1, "royal blue", "royalblue"),
    (0x0000FF, "blue"),
    (0x1E90FF, "dodger blue", "dodgerblue"),
    (0x00BFFF, "deep sky", "deepskyblue"),
    (0x87CEEB, "sky blue", "skyblue"),
    (0x87CEFA, "light sky", "lightskyblue"),
    (0x4682B4, "steel blue", "steelblue"),
    (0xB0C4DE, "light steel", "lightsteelblue"),
    (0xADD8E6, "light blue", "lightblue"),
    (0xB0E0E6, "powder blue", "powderblue"),
    (0xAFEEEE, "pale turquoise", "paleturquoise"),
    (0x00CED1, "dark turquoise", "darkturquoise"),
    (0x48D1CC, "medium turquoise", "mediumturquoise"),
    (0x40E0D0, "turquoise"),
    (0x00FFFF, "cyan"),
    (0xE0FFFF, "light cyan", "lightcyan"),
    (0x5F9EA0, "cadet blue", "cadetblue"),
    (0x66CDAA, "medium aquamarine", "mediumaquamarine"),
    (0x7FFFD4, "aquamarine"),
    (0x006400, "dark green", "darkgreen"),
    (0x556B2F, "dark olive", "darkolivegreen"),
    (0x8FBC8F, "dark sea", "darkseagreen"),
    (0x2E8B57, "sea green", "seagreen"),
    (0x3CB371, "medium sea", "mediumseagreen"),
    (0x20B2AA, "light sea", "lightseagreen"),
    (0x98FB98, "pale green", "palegreen"),
    (0x00FF7F, "spring green", "springgreen"),
    (0x7CFC00, "lawn green", "lawngreen"),
    (0x00FF00, "green"),
    (0x7FFF00, "chartreuse"),
    (0x00FA9A, "medium spring", "mediumspringgreen"),
    (0xADFF2F, "green yellow", "greenyellow"),
    (0x32CD32, "lime green", "limegreen"),
    (0x9ACD32, "yellow green", "yellowgreen"),
    (0x228B22, "forest green", "forestgreen"),
    (0x6B8E23, "olive drab", "olivedrab"),
    (0xBDB76B, "dark khaki", "darkkhaki"),
    (0xF0E68C, "khaki"),
    (0xEEE8AA, "pale goldenrod", "palegoldenrod"),
    (0xFAFAD2, "light goldenrod", "lightgoldenrodyellow"),
    (0xFFFFE0, "light yellow", "lightyellow"),
    (0xFFFF00, "yellow"),
    (0xFFD700, "gold"),
    (0xEEDD82, "light goldenrod", "lightgoldenrod"),
    (0xDAA520, "goldenrod"),
    (0xB8860B, "dark goldenrod", "darkgoldenrod"),
    (0xBC8F8F, "rosy brown", "rosybrown"),
    (0xCD5C5C, "indian red", "indianred"),
    (0x8B4513, "saddle brown", "saddlebrown"),
    (0xA0522D, "sienna"),
    (0xCD853F, "peru"),
    (0xDEB887, "burlywood"),
    (0xF5F5DC, "beige"),
    (0xF5DEB3, "wheat"),
    (0xF4A460, "sandy brown", "sandybrown"),
    (0xD2B48C, "tan"),
    (0xD2691E, "chocolate"),
    (0xB22222, "firebrick"),
    (0xA52A2A, "brown"),
    (0xE9967A, "dark salmon", "darksalmon"),
    (0xFA8072, "salmon"),
    (0xFFA07A, "light salmon", "lightsalmon"),
    (0xFFA500, "orange"),
    (0xFF8C00, "dark orange", "darkorange"),
    (0xFF7F50, "coral"),
    (0xF08080, "light coral", "lightcoral"),
    (0xFF6347, "tomato"),
    (0xFF4500, "orange red", "orangered"),
    (0xFF0000, "red"),
    (0xFF69B4, "hot pink", "hotpink"),
    (0xFF1493, "deep pink", "deeppink"),
    (0xFFC0CB, "pink"),
    (0xFFB6C1, "light pink", "lightpink"),
    (0xDB7093, "pale violet", "palevioletred"),
    (0xB03060, "maroon"),
    (0xC71585, "medium violet", "mediumvioletred"),
    (0xD02090, "violet red", "violetred"),
    (0xFF00FF, "magenta"),
    (0xEE82EE, "violet"),
    (0xDDA0DD, "plum"),
    (0xDA70D6, "orchid"),
    (0xBA55D3, "medium orchid", "mediumorchid"),
    (0x9932CC, "dark orchid", "darkorchid"),
    (0x9400D3, "dark violet", "darkviolet"),
    (0x8A2BE2, "blue violet", "blueviolet"),
    (0xA020F0, "purple"),
    (0x9370DB, "medium purple", "mediumpurple"),
    (0xD8BFD8, "thistle"),
)

# Families with four numbered shades: name1 .. name4.
_SHADES: tuple[tuple[str, int, int, int, int], ...] = (
    ("snow", 0xFFFAFA, 0xEEE9E9, 0xCDC9C9, 0x8B8989),
    ("seashell", 0xFFF5EE, 0xEEE5DE, 0xCDC5BF, 0x8B8682),
    ("antiquewhite", 0xFFEFDB, 0xEEDFCC, 0xCDC0B0, 0x8B8378),
    ("bisque", 0xFFE4C4, 0xEED5B7, 0xCDB79E, 0x8B7D6B),
    ("peachpuff", 0xFFDAB9, 0xEECBAD, 0xCDAF95, 0x8B7765),
    ("navajowhite", 0xFFDEAD, 0xEECFA1, 0xCDB38B, 0x8B795E),
    ("lemonchiffon", 0xFFFACD, 0xEEE9BF, 0xCDC9A5, 0x8B8970),
    ("cornsilk", 0xFFF8DC, 0xEEE8CD, 0xCDC8B1, 0x8B8878),
    ("ivory", 0xFFFFF0, 0xEEEEE0, 0xCDCDC1, 0x8B8B83),
    ("honeydew", 0xF0FFF0, 0xE0EEE0, 0xC1CDC1, 0x838B83),
    ("lavenderblush", 0xFFF0F5, 0xEEE0E5, 0xCDC1C5, 0x8B8386),
    ("mistyrose", 0xFFE4E1, 0xEED5D2, 0xCDB7B5, 0x8B7D7B),
    ("azure", 0xF0FFFF, 0xE0EEEE, 0xC1CDCD, 0x838B8B),
    ("slateblue", 0x836FFF, 0x7A67EE, 0x6959CD, 0x473C8B),
    ("royalblue", 0x4876FF, 0x436EEE, 0x3A5FCD, 0x27408B),
    ("blue", 0x0000FF, 0x0000EE, 0x0000CD, 0x00008B),
    ("dodgerblue", 0x1E90FF, 0x1C86EE, 0x1874CD, 0x104E8B),
    ("steelblue", 0x63B8FF, 0x5CACEE, 0x4F94CD, 0x36648B),
    ("deepskyblue", 0x00BFFF, 0x00B2EE, 0x009ACD, 0x00688B),
    ("skyblue", 0x87CEFF, 0x7EC0EE, 0x6CA6CD, 0x4A708B),
    ("lightskyblue", 0xB0E2FF, 0xA4D3EE, 0x8DB6CD, 0x607B8B),
    ("slategray", 0xC6E2FF, 0xB9D3EE, 0x9FB6CD, 0x6C7B8B),
    ("lightsteelblue", 0xCAE1FF, 0xBCD2EE, 0xA2B5CD, 0x6E7B8B),
    ("lightblue", 0xBFEFFF, 0xB2DFEE, 0x9AC0CD, 0x68838B),
    ("lightcyan", 0xE0FFFF, 0xD1EEEE, 0xB4CDCD, 0x7A8B8B),
    ("paleturquoise", 0xBBFFFF, 0xAEEEEE, 0x96CDCD, 0x668B8B),
    ("cadetblue", 0x98F5FF, 0x8EE5EE, 0x7AC5CD, 0x53868B),
    ("turquoise", 0x00F5FF, 0x00E5EE, 0x00C5CD, 0x00868B),
    ("cyan", 0x00FFFF, 0x00EEEE, 0x00CDCD, 0x008B8B),
    ("darkslategray", 0x97FFFF, 0x8DEEEE, 0x79CDCD, 0x528B8B),
    ("aquamarine", 0x7FFFD4, 0x76EEC6, 0x66CDAA, 0x458B74),
    ("darkseagreen", 0xC1FFC1, 0xB4EEB4, 0x9BCD9B, 0x698B69),
    ("seagreen", 0x54FF9F, 0x4EEE94, 0x43CD80, 0x2E8B57),
    ("palegreen", 0x9AFF9A, 0x90EE90, 0x7CCD7C, 0x548B54),
    ("springgreen", 0x00FF7F, 0x00EE76, 0x00CD66, 0x008B45),
    ("green", 0x00FF00, 0x00EE00, 0x00CD00, 0x008B00),
    ("chartreuse", 0x7FFF00, 0x76EE00, 0x66CD00, 0x458B00),
    ("olivedrab", 0xC0FF3E, 0xB3EE3A, 0x9ACD32, 0x698B22),
    ("darkolivegreen", 0xCAFF70, 0xBCEE68, 0xA2CD5A, 0x6E8B3D),
    ("khaki", 0xFFF68F, 0xEEE685, 0xCDC673, 0x8B864E),
    ("lightgoldenrod", 0xFFEC8B, 0xEEDC82, 0xCDBE70, 0x8B814C),
    ("lightyellow", 0xFFFFE0, 0xEEEED1, 0xCDCDB4, 0x8B8B7A),
    ("yellow", 0xFFFF00, 0xEEEE00, 0xCDCD00, 0x8B8B00),
    ("gold", 0xFFD700, 0xEEC900, 0xCDAD00, 0x8B7500),
    ("goldenrod", 0xFFC125, 0xEEB422, 0xCD9B1D, 0x8B6914),
    ("darkgoldenrod", 0xFFB90F, 0xEEAD0E, 0xCD950C, 0x8B6508),
    ("rosybrown", 0xFFC1C1, 0xEEB4B4, 0xCD9B9B, 0x8B6969),
    ("indianred", 0xFF6A6A, 0xEE6363, 0xCD5555, 0x8B3A3A),
    ("sienna", 0xFF8247, 0xEE7942, 0xCD6839, 0x8B4726),
    ("burlywood", 0xFFD39B, 0xEEC591, 0xCDAA7D, 0x8B7355),
    ("wheat", 0xFFE7BA, 0xEED8AE, 0xCDBA96, 0x8B7E66),
    ("tan", 0xFFA54F, 0xEE9A49, 0xCD853F, 0x8B5A2B),
    ("chocolate", 0xFF7F24, 0xEE7621, 0xCD661D, 0x8B4513),
    ("firebrick", 0xFF3030, 0xEE2C2C, 0xCD2626, 0x8B1A1A),
    ("brown", 0xFF4040, 0xEE3B3B, 0xCD3333, 0x8B2323),
    ("salmon", 0xFF8C69, 0xEE8262, 0xCD7054, 0x8B4C39),
    ("lightsalmon", 0xFFA07A, 0xEE9572, 0xCD8162, 0x8B5742),
    ("orange", 0xFFA500, 0xEE9A00, 0xCD8500, 0x8B5A00),
    ("darkorange", 0xFF7F00, 0xEE7600, 0xCD6600, 0x8B4500),
    ("coral", 0xFF7256, 0xEE6A50, 0xCD5B45, 0x8B3E2F),
    ("tomato", 0xFF6347, 0xEE5C42, 0xCD4F39, 0x8B3626),
    ("orangered", 0xFF4500, 0xEE4000, 0xCD3700, 0x8B2500),
    ("red", 0xFF0000, 0xEE0000, 0xCD0000, 0x8B0000),
    ("deeppink", 0xFF1493, 0xEE1289, 0xCD1076, 0x8B0A50),
    ("hotpink", 0xFF6EB4, 0xEE6AA7, 0xCD6090, 0x8B3A62),
    ("pink", 0xFFB5C5, 0xEEA9B8, 0xCD919E, 0x8B636C),
    ("lightpink", 0xFFAEB9, 0xEEA2AD, 0xCD8C95, 0x8B5F65),
    ("palevioletred", 0xFF82AB, 0xEE799F, 0xCD6889, 0x8B475D),
    ("maroon", 0xFF34B3, 0xEE30A7, 0xCD2990, 0x8B1C62),
    ("violetred", 0xFF3E96, 0xEE3A8C, 0xCD3278, 0x8B2252),
    ("magenta", 0xFF00FF, 0xEE00EE, 0xCD00CD, 0x8B008B),
    ("orchid", 0xFF83FA, 0xEE7AE9, 0xCD69C9, 0x8B4789),
    ("plum", 0xFFBBFF, 0xEEAEEE, 0xCD96CD, 0x8B668B),
    ("mediumorchid", 0xE066FF, 0xD15FEE, 0xB452CD, 0x7A378B),
    ("darkorchid", 0xBF3EFF, 0xB23AEE, 0x9A32CD, 0x68228B),
    ("purple", 0x9B30FF, 0x912CEE, 0x7D26CD, 0x551A8B),
    ("mediumpurple", 0xAB82FF, 0x9F79EE, 0x8968CD, 0x5D478B),
    ("thistle", 0xFFE1FF, 0xEED2EE, 0xCDB5CD, 0x8B7B8B),
)

# Intensity of gray0 .. gray100, one byte per level.
_GRAY_LEVELS = bytes.fromhex(
    "00 03 05 08 0a 0d 0f 12 14 17 1a 1c 1f 21 24 26 29 2b 2e 30"
    " 33 36 38 3b 3d 40 42 45 47 4a 4d 4f 52 54 57 59 5c 5e 61 63"
    " 66 69 6b 6e 70 73 75 78 7a 7d 7f 82 85 87 8a 8c 8f 91 94 96"
    " 99 9c 9e a1 a3 a6 a8 ab ad b0 b3 b5 b8 ba bd bf c2 c4 c7 c9"
    " cc cf d1 d4 d6 d9 db de e0 e3 e5 e8 eb ed f0 f2 f5 f7 fa fc ff"
)

_TAIL: tuple[tuple, ...] = (
    (0xA9A9A9, "dark grey", "darkgrey", "dark gray", "darkgray"),
    (0x00008B, "dark blue", "darkblue"),
    (0x008B8B, "dark cyan", "darkcyan"),
    (0x8B008B, "dark magenta", "darkmagenta"),
    (0x8B0000, "dark red", "darkred"),
    (0x90EE90, "light green", "lightgreen"),
    (-1, "none"),
)


def _build_table() -> dict[str, int]:
    table: dict[str, int] = {}
    for value, *names in _NAMED:
        for name in names:
            table.setdefault(name, value)
    for family, *shades in _SHADES:
        for number, value in enumerate(shades, start=1):
            table.setdefault(f"{family}{number}", value)
    for level, intensity in enumerate(_GRAY_LEVELS):
        value = intensity * 0x010101
        table.setdefault(f"gray{level}", value)
        table.setdefault(f"grey{level}", value)
    for value, *names in _TAIL:
        for name in names:
            table.setdefault(name, value)
    return table


COLOR_NAMES: dict[str, int] = _build_table()

_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _hex_prefix_value(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return _to_int32(-value if sign == "-" else value)


def lookup_color(name: str) -> int:
    """Return the 0xRRGGBB value of a colour name or '#hex' literal.

    Names are matched without regard to case. Unknown names give 0 and
    the name "none" gives -1 (transparent).
    """
    if name.startswith("#"):
        return _hex_prefix_value(name[1:])
    return COLOR_NAMES.get(name.lower(), 0)


class RgbShifts(NamedTuple):
    """Position and width of each colour channel within a pixel value."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int


def _mask_layout(mask: int, channel: str) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"{channel} mask must be a positive bit mask, got {mask}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> RgbShifts:
    """Derive channel shifts and widths from a visual's colour masks."""
    return RgbShifts(
        *_mask_layout(red_mask, "red"),
        *_mask_layout(green_mask, "green"),
        *_mask_layout(blue_mask, "blue"),
    )


def good_color(color: int, depth: int, shifts: RgbShifts) -> int:
    """Convert 0xRRGGBB to a pixel value for a visual of the given depth.

    Visuals of 24 bits or more take the colour unchanged.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts.red_bits)) << shifts.red_shift)
        + ((green >> (16 - shifts.green_bits)) << shifts.green_shift)
        + ((blue >> (16 - shifts.blue_bits)) << shifts.blue_shift)
    )