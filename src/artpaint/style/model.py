# topmark:header:start
#
#   project      : ArtPaint
#   file         : model.py
#   file_relpath : src/artpaint/style/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style primitives: colors, attributes, style descriptors and compiled styles.

Sections:
    * NamedColor / FixedColor / RgbColor: the closed set of colors. ``Color`` is
      the union of the three; code that consumes a color dispatches on the
      concrete type and treats any other value as a programming error.
    * Attribute: the closed set of text attribute flags, each tied to its SGR code.
    * StyleSpec: a style descriptor as written in a document (keeps the
      attribute list verbatim so documents re-encode faithfully).
    * Style: the compiled, canonical style (attribute *set*), hashable so equal
      styles can be coalesced into a single SGR span.

All types are immutable. Range checks on palette and RGB components happen
in ``__post_init__`` so an out-of-range color can never be constructed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final

COMPONENT_MIN: Final[int] = 0
COMPONENT_MAX: Final[int] = 255


def _check_component(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not COMPONENT_MIN <= value <= COMPONENT_MAX:
        raise ValueError(f"{name} must be in [{COMPONENT_MIN}, {COMPONENT_MAX}], got {value}")


class NamedColor(str, Enum):
    """The eight standard terminal colors, in SGR order.

    The enum value is the spelling used in documents (``"Red"``).
    """

    BLACK = "Black"
    RED = "Red"
    GREEN = "Green"
    YELLOW = "Yellow"
    BLUE = "Blue"
    PURPLE = "Purple"
    CYAN = "Cyan"
    WHITE = "White"

    @property
    def index(self) -> int:
        """Return the 0-based position of the color in the standard palette."""
        return list(NamedColor).index(self)


@dataclass(frozen=True, slots=True)
class FixedColor:
    """A color from the 256-color palette.

    Attributes:
        index: Palette index in [0, 255].
    """

    index: int

    def __post_init__(self) -> None:
        _check_component("Palette index", self.index)


@dataclass(frozen=True, slots=True)
class RgbColor:
    """A direct 24-bit color.

    Attributes:
        r: Red component in [0, 255].
        g: Green component in [0, 255].
        b: Blue component in [0, 255].
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_component("Red component", self.r)
        _check_component("Green component", self.g)
        _check_component("Blue component", self.b)


Color = NamedColor | FixedColor | RgbColor


class Attribute(str, Enum):
    """Text attribute flags.

    The enum value is the spelling used in documents (``"Bold"``).
    """

    BOLD = "Bold"
    DIMMED = "Dimmed"
    ITALIC = "Italic"
    UNDERLINED = "Underlined"
    BLINK = "Blink"
    REVERSE = "Reverse"
    HIDDEN = "Hidden"
    STRIKETHROUGH = "Strikethrough"

    @property
    def sgr_code(self) -> int:
        """Return the SGR parameter that turns this attribute on."""
        return {
            Attribute.BOLD: 1,
            Attribute.DIMMED: 2,
            Attribute.ITALIC: 3,
            Attribute.UNDERLINED: 4,
            Attribute.BLINK: 5,
            Attribute.REVERSE: 7,
            Attribute.HIDDEN: 8,
            Attribute.STRIKETHROUGH: 9,
        }[self]


@dataclass(frozen=True, slots=True)
class StyleSpec:
    """Style descriptor as found in a document's style map.

    Attributes:
        foreground: Optional foreground color.
        background: Optional background color.
        attributes: Attribute flags in document order (duplicates allowed).
    """

    foreground: Color | None = None
    background: Color | None = None
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True, slots=True)
class Style:
    """Compiled terminal style.

    Two styles compare equal when they would produce the same SGR parameters,
    which is what run coalescing relies on.

    Attributes:
        foreground: Optional foreground color.
        background: Optional background color.
        attributes: Set of attribute flags.
    """

    foreground: Color | None = None
    background: Color | None = None
    attributes: frozenset[Attribute] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        """Return True if this style applies no styling at all."""
        return self.foreground is None and self.background is None and not self.attributes


EMPTY_STYLE: Final[Style] = Style()
