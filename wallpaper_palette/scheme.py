import json
from dataclasses import dataclass
from typing import Tuple

from .color import Color

TERMINAL_COLOR_COUNT = 16


def _as_bool(value):
    if not isinstance(value, bool):
        raise ValueError(f"is_dark must be true or false, got {value!r}")
    return value


@dataclass(frozen=True)
class ColorScheme:
    """A complete terminal color scheme derived from one wallpaper.

    `colors` follows the pywal layout (color0-color15). The scheme is never
    mutated after construction; encodings below are pure formatting.
    """

    wallpaper: str
    is_dark: bool
    background: Color
    foreground: Color
    cursor: Color
    colors: Tuple[Color, ...]
    alpha: int = 100

    def __post_init__(self):
        colors = tuple(Color(*c) for c in self.colors)
        if len(colors) != TERMINAL_COLOR_COUNT:
            raise ValueError(
                f"A scheme needs {TERMINAL_COLOR_COUNT} colors, got {len(colors)}"
            )
        object.__setattr__(self, "colors", colors)
        for name in ("background", "foreground", "cursor"):
            object.__setattr__(self, name, Color(*getattr(self, name)))

    def to_dict(self):
        return {
            "wallpaper": self.wallpaper,
            "is_dark": self.is_dark,
            "alpha": self.alpha,
            "background": self.background.to_dict(),
            "foreground": self.foreground.to_dict(),
            "cursor": self.cursor.to_dict(),
            "colors": [c.to_dict() for c in self.colors],
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            wallpaper=str(data["wallpaper"]),
            is_dark=_as_bool(data["is_dark"]),
            alpha=int(data.get("alpha", 100)),
            background=Color.from_dict(data["background"]),
            foreground=Color.from_dict(data["foreground"]),
            cursor=Color.from_dict(data["cursor"]),
            colors=[Color.from_dict(c) for c in data["colors"]],
        )

    def to_json(self):
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, text):
        return cls.from_dict(json.loads(text))

    def _named(self):
        yield "background", self.background
        yield "foreground", self.foreground
        yield "cursor", self.cursor
        for i, color in enumerate(self.colors):
            yield f"color{i}", color

    def to_shell_format(self):
        """Shell variable assignments, pywal-compatible"""
        lines = [f"wallpaper='{self.wallpaper}'"]
        lines.extend(f"{name}='{color.hex()}'" for name, color in self._named())
        return "\n".join(lines)

    def to_css_format(self):
        """CSS custom properties on :root"""
        lines = [":root {"]
        lines.extend(f"  --{name}: {color.hex()};" for name, color in self._named())
        lines.append("}")
        return "\n".join(lines)

    def to_variables(self):
        """Template variables: {color0}, {color0.strip}, {background.rgb}, ..."""
        variables = {
            "wallpaper": self.wallpaper,
            "alpha": str(self.alpha),
            "background.alpha": str(self.alpha),
            "background.alpha_dec": f"{self.alpha / 100:.2f}",
        }

        for name, color in self._named():
            variables[name] = color.hex()
            variables[f"{name}.strip"] = color.hex_strip()
            variables[f"{name}.rgb"] = color.rgb_string()
            variables[f"{name}.rgba"] = color.rgba_string(1.0)
            # Float components, used by iTerm2 dynamic profiles
            for channel in ("r", "g", "b"):
                variables[f"{name}.{channel}"] = f"{getattr(color, channel):.10f}"
            if name.startswith("color"):
                variables[f"{name}.xrgba"] = color.xrgba_string()
                variables[f"{name}.rgba_25"] = color.rgba_string(0.25)

        return variables
