from dataclasses import dataclass, field
from uuid import UUID, uuid4

from tintthat.config import settings
from tintthat.models.color import BLACK, BROWN, CYAN, RED, WHITE, Color

# Color appended by "add color"
DEFAULT_COLOR = WHITE


@dataclass
class Palette:
    """
    A titled, ordered list of colors.

    The title may be empty (pending rename). Color order is display order.
    A palette owns its color list; the list passed in is copied.
    """

    title: str = ""
    colors: list[Color] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        self.colors = list(self.colors)

    def __len__(self) -> int:
        return len(self.colors)


def new_palette(title: str | None = None, colors: list[Color] | None = None) -> Palette:
    """Build the palette appended by "add palette"."""
    return Palette(
        title=settings.added_palette_title if title is None else title,
        colors=[BLACK, CYAN] if colors is None else colors,
    )


def starter_palette() -> Palette:
    """Build the palette seeded into a freshly created collection on request."""
    return Palette(title=settings.default_palette_title, colors=[RED, CYAN, BROWN])
