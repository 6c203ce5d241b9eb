"""Colour-space conversions: RGB <-> HSV, YUV, XYZ, L*a*b*.

RGB (Color) is the only storage form. Every other space is a transient
NamedTuple computed on demand for sorting and distance purposes.

Ranges:
  HSV  h in [0, 360), s and v in [0, 100]
  YUV  y in [0, 255], u and v centred on 128 (BT.601 analogue weights)
  XYZ  D65, scaled so that white has Y = 100
  Lab  l in [0, 100], a and b signed and unbounded

All functions are total over 8-bit input: the HSV divisions are guarded
and every conversion back to RGB clamps and rounds.
"""

import math
from typing import NamedTuple

from palette_swatch.core.palette import Color


class HSV(NamedTuple):
    h: float
    s: float
    v: float


class YUV(NamedTuple):
    y: float
    u: float
    v: float


class XYZ(NamedTuple):
    x: float
    y: float
    z: float


class Lab(NamedTuple):
    l: float  # noqa: E741
    a: float
    b: float


# D65 reference white, Y normalised to 100
XN = 95.0489
YN = 100.0
ZN = 108.8840

# sRGB -> XYZ (D65)
_RGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# XYZ -> sRGB (D65)
_XYZ_TO_RGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

_LAB_EPSILON = (6.0 / 29.0) ** 3
_LAB_DELTA = 6.0 / 29.0
_LAB_SLOPE = 7.787
_LAB_OFFSET = 16.0 / 116.0


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def _mat_mul(m: tuple, a: float, b: float, c: float) -> tuple[float, float, float]:
    return (
        m[0][0] * a + m[0][1] * b + m[0][2] * c,
        m[1][0] * a + m[1][1] * b + m[1][2] * c,
        m[2][0] * a + m[2][1] * b + m[2][2] * c,
    )


def normalize(color: Color) -> tuple[float, float, float]:
    """Scale 8-bit channels to [0, 1]."""
    return (color.r / 255.0, color.g / 255.0, color.b / 255.0)


def linearize(value: float) -> float:
    """sRGB companding -> linear light, value in [0, 1]."""
    if value <= 0.04045:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def apply_gamma(value: float) -> float:
    """Linear light -> sRGB companding, value in [0, 1]."""
    if value <= 0.0031308:
        return value * 12.92
    return 1.055 * value ** (1.0 / 2.4) - 0.055


# -- HSV ---------------------------------------------------------------------


def rgb_to_hsv(color: Color) -> HSV:
    r, g, b = normalize(color)
    v = max(r, g, b)
    c = v - min(r, g, b)

    # v == 0 is pure black, c == 0 is any grey: both have no defined hue
    s = (c / v) * 100.0 if v > 0 else 0.0
    if c == 0:
        h = 0.0
    elif v == r:
        h = 60.0 * (((g - b) / c) % 6.0)
    elif v == g:
        h = 60.0 * ((b - r) / c + 2.0)
    else:
        h = 60.0 * ((r - g) / c + 4.0)

    return HSV(h % 360.0, s, v * 100.0)


# -- YUV ---------------------------------------------------------------------


def rgb_to_yuv(color: Color) -> YUV:
    y = 0.299 * color.r + 0.587 * color.g + 0.114 * color.b
    u = 0.492 * (color.b - y) + 128.0
    v = 0.877 * (color.r - y) + 128.0
    return YUV(y, u, v)


def yuv_to_rgb(yuv: YUV) -> Color:
    y, u, v = yuv
    r = y + 1.403 * (v - 128.0)
    g = y - 0.344 * (u - 128.0) - 0.714 * (v - 128.0)
    b = y + 1.770 * (u - 128.0)
    return Color(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


# -- XYZ ---------------------------------------------------------------------


def rgb_to_xyz(color: Color) -> XYZ:
    r, g, b = (linearize(c) for c in normalize(color))
    x, y, z = _mat_mul(_RGB_TO_XYZ, r, g, b)
    return XYZ(x * 100.0, y * 100.0, z * 100.0)


def xyz_to_rgb(xyz: XYZ) -> Color:
    r, g, b = _mat_mul(_XYZ_TO_RGB, xyz.x / 100.0, xyz.y / 100.0, xyz.z / 100.0)
    # Out-of-gamut XYZ yields negative linear values; clamp before the power
    r, g, b = (apply_gamma(max(0.0, c)) * 255.0 for c in (r, g, b))
    return Color(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


def relative_luminance(color: Color) -> float:
    """Relative luminance in [0, 1]: 0.2126 R + 0.7152 G + 0.0722 B, linear light."""
    r, g, b = (linearize(c) for c in normalize(color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


# -- Lab ---------------------------------------------------------------------


def _lab_f(t: float) -> float:
    if t > _LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return _LAB_SLOPE * t + _LAB_OFFSET


def _lab_f_inv(t: float) -> float:
    if t > _LAB_DELTA:
        return t**3
    return (t - _LAB_OFFSET) / _LAB_SLOPE


def xyz_to_lab(xyz: XYZ) -> Lab:
    fx = _lab_f(xyz.x / XN)
    fy = _lab_f(xyz.y / YN)
    fz = _lab_f(xyz.z / ZN)
    # L* stays within 0-100 even when float error overshoots at white
    lightness = min(100.0, max(0.0, 116.0 * fy - 16.0))
    return Lab(lightness, 500.0 * (fx - fy), 200.0 * (fy - fz))


def lab_to_xyz(lab: Lab) -> XYZ:
    fy = (lab.l + 16.0) / 116.0
    fx = fy + lab.a / 500.0
    fz = fy - lab.b / 200.0
    return XYZ(_lab_f_inv(fx) * XN, _lab_f_inv(fy) * YN, _lab_f_inv(fz) * ZN)


def rgb_to_lab(color: Color) -> Lab:
    return xyz_to_lab(rgb_to_xyz(color))


def lab_to_rgb(lab: Lab) -> Color:
    return xyz_to_rgb(lab_to_xyz(lab))


def lab_distance(a: Lab, b: Lab) -> float:
    """CIE76 delta E."""
    return math.sqrt((a.l - b.l) ** 2 + (a.a - b.a) ** 2 + (a.b - b.b) ** 2)
