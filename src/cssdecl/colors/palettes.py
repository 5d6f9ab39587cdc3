"""Fixed semantic color palettes (light appearance) for the built-in platforms."""

from __future__ import annotations

from cssdecl.model.color import RGBA

_rgb = RGBA.from_bytes

# Touch platform: every semantic token has an equivalent.
UIKIT_PALETTE: dict[str, RGBA] = {
    "primary": _rgb(0, 0, 0),
    "secondary": _rgb(60, 60, 67, 153),
    "systemBackground": _rgb(255, 255, 255),
    "secondarySystemBackground": _rgb(242, 242, 247),
    "tertiarySystemBackground": _rgb(255, 255, 255),
    "systemGroupedBackground": _rgb(242, 242, 247),
    "secondarySystemGroupedBackground": _rgb(255, 255, 255),
    "tertiarySystemGroupedBackground": _rgb(242, 242, 247),
    "label": _rgb(0, 0, 0),
    "secondaryLabel": _rgb(60, 60, 67, 153),
    "tertiaryLabel": _rgb(60, 60, 67, 76),
    "quaternaryLabel": _rgb(60, 60, 67, 46),
    "link": _rgb(0, 122, 255),
    "placeholderText": _rgb(60, 60, 67, 76),
    "separator": _rgb(60, 60, 67, 74),
    "opaqueSeparator": _rgb(198, 198, 200),
    "systemBlue": _rgb(0, 122, 255),
    "systemGreen": _rgb(52, 199, 89),
    "systemIndigo": _rgb(88, 86, 214),
    "systemOrange": _rgb(255, 149, 0),
    "systemPink": _rgb(255, 45, 85),
    "systemPurple": _rgb(175, 82, 222),
    "systemRed": _rgb(255, 59, 48),
    "systemTeal": _rgb(48, 176, 199),
    "systemYellow": _rgb(255, 204, 0),
    "systemGray": _rgb(142, 142, 147),
    "systemGray2": _rgb(174, 174, 178),
    "systemGray3": _rgb(199, 199, 204),
    "systemGray4": _rgb(209, 209, 214),
    "systemGray5": _rgb(229, 229, 234),
    "systemGray6": _rgb(242, 242, 247),
}

# Desktop platform: mapped onto the nearest window/control colors.  There are
# no grouped backgrounds and no secondary gray levels.
APPKIT_PALETTE: dict[str, RGBA] = {
    "primary": _rgb(0, 0, 0, 217),
    "secondary": _rgb(0, 0, 0, 128),
    "systemBackground": _rgb(236, 236, 236),
    "secondarySystemBackground": _rgb(255, 255, 255),
    "tertiarySystemBackground": _rgb(255, 255, 255),  # approximate
    "label": _rgb(0, 0, 0, 217),
    "secondaryLabel": _rgb(0, 0, 0, 128),
    "tertiaryLabel": _rgb(0, 0, 0, 66),
    "quaternaryLabel": _rgb(0, 0, 0, 25),
    "link": _rgb(0, 104, 218),
    "placeholderText": _rgb(0, 0, 0, 63),
    "separator": _rgb(0, 0, 0, 25),
    "opaqueSeparator": _rgb(230, 230, 230),
    "systemBlue": _rgb(0, 122, 255),
    "systemGreen": _rgb(40, 205, 65),
    "systemIndigo": _rgb(88, 86, 214),
    "systemOrange": _rgb(255, 149, 0),
    "systemPink": _rgb(255, 45, 85),
    "systemPurple": _rgb(175, 82, 222),
    "systemRed": _rgb(255, 59, 48),
    "systemTeal": _rgb(89, 173, 196),
    "systemYellow": _rgb(255, 204, 0),
    "systemGray": _rgb(142, 142, 147),
}
