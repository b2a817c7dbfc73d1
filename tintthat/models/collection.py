from dataclasses import dataclass, field
from uuid import UUID, uuid4

from tintthat.models.color import Color
from tintthat.models.failure import DuplicatePaletteError, PaletteIndexError
from tintthat.models.palette import DEFAULT_COLOR, Palette


@dataclass(frozen=True, slots=True)
class CollectionSummary:
    """Listing entry for a stored collection."""

    id: UUID
    title: str
    palette_count: int
    color_count: int


@dataclass
class Collection:
    """
    A titled, ordered list of palettes. The unit of persistence.

    Indices follow table coordinates: section is the palette index and row
    is the color index within that palette. Indices are only valid until the
    next insert or delete; callers must re-query after any structural change.
    """

    title: str = ""
    palettes: list[Palette] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        self.palettes = list(self.palettes)
        seen: set[UUID] = set()
        for palette in self.palettes:
            if palette.id in seen:
                raise DuplicatePaletteError(palette.id)
            seen.add(palette.id)

    # --- Queries ---

    @property
    def is_empty(self) -> bool:
        """True if the collection holds no palettes."""
        return not self.palettes

    @property
    def count(self) -> int:
        """Number of palettes."""
        return len(self.palettes)

    def number_of_colors(self, section: int) -> int:
        """Number of colors in the palette at `section`."""
        return len(self._palette(section).colors)

    def title_of_palette(self, section: int) -> str:
        return self._palette(section).title

    def color_of_palette(self, section: int, row: int) -> Color:
        palette = self._palette(section)
        self._check_row(palette, section, row)
        return palette.colors[row]

    def total_colors(self) -> int:
        """Number of colors across all palettes."""
        return sum(len(palette.colors) for palette in self.palettes)

    def summary(self) -> CollectionSummary:
        return CollectionSummary(
            id=self.id,
            title=self.title,
            palette_count=self.count,
            color_count=self.total_colors(),
        )

    # --- Mutations ---

    def set_title_of_palette(self, section: int, title: str) -> None:
        self._palette(section).title = title

    def set_color_of_palette(self, section: int, row: int, color: Color) -> None:
        """Replace the color at (section, row). Applying the same value twice is a no-op."""
        palette = self._palette(section)
        self._check_row(palette, section, row)
        palette.colors[row] = color

    def add_palette(self, palette: Palette) -> None:
        """
        Append a palette. Its section is the new `count - 1`.

        Raises:
            DuplicatePaletteError: If a palette with the same id is already present
        """
        if any(existing.id == palette.id for existing in self.palettes):
            raise DuplicatePaletteError(palette.id)
        self.palettes.append(palette)

    def add_color_to_palette(self, section: int) -> int:
        """
        Append the default color to the palette at `section`.

        Returns:
            The row index of the appended color.
        """
        palette = self._palette(section)
        palette.colors.append(DEFAULT_COLOR)
        return len(palette.colors) - 1

    def delete_palette(self, section: int) -> Palette:
        """
        Remove the palette at `section`.

        Palettes after `section` shift down by one. Returns the removed palette.
        """
        self._palette(section)
        return self.palettes.pop(section)

    # --- Index checks ---

    def _palette(self, section: int) -> Palette:
        # Negative indices are rejected rather than counted from the end
        if not 0 <= section < len(self.palettes):
            raise PaletteIndexError(section, detail=f"collection has {self.count} palettes")
        return self.palettes[section]

    @staticmethod
    def _check_row(palette: Palette, section: int, row: int) -> None:
        if not 0 <= row < len(palette.colors):
            raise PaletteIndexError(
                section, row, detail=f"palette has {len(palette.colors)} colors"
            )
