import re
from dataclasses import dataclass

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")

COMPONENT_MIN = 0
COMPONENT_MAX = 255


@dataclass(frozen=True, slots=True)
class Color:
    """
    An immutable RGBA color.

    Attributes:
        red: Red component (0-255)
        green: Green component (0-255)
        blue: Blue component (0-255)
        alpha: Opacity (0-255, 255 is fully opaque)
    """

    red: int
    green: int
    blue: int
    alpha: int = COMPONENT_MAX

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Color component '{name}' must be an integer, got {value!r}")
            if not COMPONENT_MIN <= value <= COMPONENT_MAX:
                raise ValueError(
                    f"Color component '{name}' must be between "
                    f"{COMPONENT_MIN} and {COMPONENT_MAX}, got {value}"
                )

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """
        Parse "#RRGGBB" or "#RRGGBBAA".

        The leading '#' is optional and digits are case-insensitive.

        Raises:
            ValueError: If the string is not a hex color
        """
        match = _HEX_PATTERN.match(value.strip())
        if not match:
            raise ValueError(f"Invalid hex color: {value!r}")

        rgb, alpha = match.groups()
        return cls(
            red=int(rgb[0:2], 16),
            green=int(rgb[2:4], 16),
            blue=int(rgb[4:6], 16),
            alpha=int(alpha, 16) if alpha else COMPONENT_MAX,
        )

    @property
    def hex(self) -> str:
        """Render as "#RRGGBBAA" in uppercase."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}{self.alpha:02X}"

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
CYAN = Color(0, 255, 255)
BROWN = Color(153, 102, 51)
