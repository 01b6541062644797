# tyrecompare/models/tyre_size.py

"""Tyre size descriptor used to parameterise a search."""

import re
from dataclasses import dataclass

from tyrecompare.config.settings import Settings

# width / height [Z]R rim [load speed], separators are forgiving
_SIZE_RE = re.compile(
    r"""^\s*
    (?P<width>\d+(?:[.,]\d+)?)\s*[/\s]\s*
    (?P<height>\d+(?:[.,]\d+)?)\s*(?:Z?R|-|\s)\s*
    (?P<rim>\d+(?:[.,]\d+)?)
    (?:\s*(?P<load>\d{2,3}(?:/\d{2,3})?)\s*(?P<speed>[A-Z]{1,2})?)?
    \s*$""",
    re.IGNORECASE | re.VERBOSE,
)


@dataclass(frozen=True)
class TyreSizeDescriptor:
    """Free-form size fields as typed by the user.

    Values are passed to vendors verbatim and are not validated
    numerically; any of them may be an empty string.
    """

    width: str = ""
    aspect_height: str = ""
    rim_diameter: str = ""
    load_index: str = ""
    speed_symbol: str = ""

    @classmethod
    def default(cls) -> "TyreSizeDescriptor":
        """Return the descriptor pre-filled in the TUI."""
        return cls(
            width=Settings.DEFAULT_WIDTH,
            aspect_height=Settings.DEFAULT_ASPECT_HEIGHT,
            rim_diameter=Settings.DEFAULT_RIM_DIAMETER,
            load_index=Settings.DEFAULT_LOAD_INDEX,
            speed_symbol=Settings.DEFAULT_SPEED_SYMBOL,
        )

    @classmethod
    def parse(cls, text: str) -> "TyreSizeDescriptor":
        """Parse size text such as ``205/55 R16 91V`` or ``205 55 16``.

        Raises ``ValueError`` when width, height and rim cannot be found.
        """
        match = _SIZE_RE.match(text)
        if match is None:
            msg = f"Unrecognised tyre size: {text!r}"
            raise ValueError(msg)
        return cls(
            width=match.group("width"),
            aspect_height=match.group("height"),
            rim_diameter=match.group("rim"),
            load_index=match.group("load") or "",
            speed_symbol=(match.group("speed") or "").upper(),
        )

    def format(self) -> str:
        """Canonical display form, e.g. ``205/55 R16 91V``."""
        return (
            f"{self.width}/{self.aspect_height} R{self.rim_diameter} "
            f"{self.load_index}{self.speed_symbol}"
        )

    def file_slug(self) -> str:
        """Canonical form made safe for use inside a file name."""
        slug = self.format().strip()
        slug = slug.replace("/", "-").replace("\\", "-")
        return re.sub(r"\s+", "_", slug)

    def __str__(self) -> str:
        return self.format()


def format_size(descriptor: TyreSizeDescriptor) -> str:
    """Return the canonical display string for *descriptor*."""
    return descriptor.format()
