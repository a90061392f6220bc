from collections import namedtuple


def _clamp01(value):
    return max(0.0, min(1.0, value))


def _to_u8(value):
    # Truncates toward zero, so 0.5 becomes 127 (0x7F)
    return int(value * 255.0)


def hex_to_rgb(hex_color):
    hex_color = hex_color.lstrip("#")
    if len(hex_color) != 6:
        raise ValueError(f"Expected a 6-digit hex color, got {hex_color!r}")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


class Color(namedtuple("Color", ["r", "g", "b"])):
    """RGB color with float channels in the 0.0-1.0 range.

    Instances are immutable; every transform returns a new color with its
    channels clamped back into range.
    """

    __slots__ = ()

    @classmethod
    def from_u8(cls, r, g, b):
        """Create from 0-255 integer channels"""
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def from_hex(cls, hex_color):
        return cls.from_u8(*hex_to_rgb(hex_color))

    @classmethod
    def from_dict(cls, data):
        return cls(float(data["r"]), float(data["g"]), float(data["b"]))

    def to_dict(self):
        return {"r": self.r, "g": self.g, "b": self.b}

    @property
    def luminance(self):
        """Perceived luminance (ITU-R BT.601 weights)"""
        return 0.299 * self.r + 0.587 * self.g + 0.114 * self.b

    @property
    def saturation(self):
        """HSV saturation"""
        max_c = max(self)
        min_c = min(self)
        return (max_c - min_c) / max_c if max_c > 0.0 else 0.0

    @property
    def hue(self):
        """Hue in degrees (0-360), 0 for achromatic colors"""
        r, g, b = self
        max_c = max(self)
        delta = max_c - min(self)
        if delta <= 0.0:
            return 0.0

        if max_c == r:
            h = (g - b) / delta
        elif max_c == g:
            h = 2.0 + (b - r) / delta
        else:
            h = 4.0 + (r - g) / delta

        h *= 60.0
        if h < 0.0:
            h += 360.0
        return h

    def lightened(self, amount):
        """Move each channel toward 1.0 by `amount` (0.0-1.0)"""
        return Color(*(_clamp01(c + (1.0 - c) * amount) for c in self))

    def darkened(self, amount):
        """Scale each channel toward 0.0 by `amount` (0.0-1.0)"""
        return Color(*(_clamp01(c * (1.0 - amount)) for c in self))

    def saturated(self, factor):
        """Push channels away from (factor > 1) or toward the luminance gray"""
        gray = self.luminance
        return Color(*(_clamp01(gray + (c - gray) * factor) for c in self))

    def distance_squared(self, other):
        dr = self.r - other.r
        dg = self.g - other.g
        db = self.b - other.b
        return dr * dr + dg * dg + db * db

    def hex(self):
        """Hex string, e.g. "#FF7F00" """
        return "#" + self.hex_strip()

    def hex_strip(self):
        return "{:02X}{:02X}{:02X}".format(*(_to_u8(c) for c in self))

    def rgb_string(self):
        """Decimal channels as "r, g, b" (0-255)"""
        return "{}, {}, {}".format(*(_to_u8(c) for c in self))

    def rgba_string(self, alpha=1.0):
        """Float channels as "r g b a", the form Xcode themes expect"""
        return f"{self.r:.6f} {self.g:.6f} {self.b:.6f} {alpha:.2f}"

    def xrgba_string(self):
        return "{:02x}/{:02x}/{:02x}/ff".format(*(_to_u8(c) for c in self))
