"""
Renderer registry: raw field value -> display representation.

Every field type gets two pure functions:

- a formatter, value -> str, used for plain-text output (filter text, status, export)
- a renderer, (value, FieldContext) -> DisplayWidget, used for the grid cell

Widgets are frozen dataclasses and serialise to small dicts via ``to_dict()``;
the grid's ``DisplayCell`` component only draws what it is given, so all
display rules live here.

None of the functions in this module raise on malformed input. A value of the
wrong type degrades to ``str(value)`` (or a placeholder), never to an exception.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from functools import lru_cache
from numbers import Real
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)


MAX_SKILL_TAGS = 3
MAX_SKILL_CHARS = 15
ELLIPSIS = "..."

ACTIVE_LABEL = "Active"
INACTIVE_LABEL = "Inactive"
NO_SKILLS_LABEL = "No skills"
NO_MANAGER_LABEL = "None"


class RendererKind(str, Enum):
    PLAIN = "plain"
    BOOLEAN = "boolean"
    STRING_LIST = "string_list"
    OPTIONAL_REFERENCE = "optional_reference"
    CURRENCY = "currency"
    DATE = "date"
    RATING = "rating"


# -----------------------------------------------------------------------------
# Display widgets
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Text:
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "text", "text": self.text}


@dataclass(frozen=True)
class Badge:
    """Pill with a colour tone ("success" / "danger")."""
    text: str
    tone: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "badge", "text": self.text, "tone": self.tone}


@dataclass(frozen=True)
class Tag:
    text: str
    title: str


@dataclass(frozen=True)
class TagList:
    """
    Row of tags, optionally followed by a "+N more" suffix.

    When ``placeholder`` is set the list is empty and the placeholder is drawn
    instead.
    """
    tags: Tuple[Tag, ...] = ()
    suffix: Optional[str] = None
    placeholder: Optional[str] = None

    @property
    def texts(self) -> List[str]:
        return [t.text for t in self.tags]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "tags",
            "tags": [{"text": t.text, "title": t.title} for t in self.tags],
            "suffix": self.suffix,
            "placeholder": self.placeholder,
        }


DisplayWidget = Union[Text, Badge, TagList]


@dataclass(frozen=True)
class FieldContext:
    """What a renderer knows about the cell besides its value."""
    field: str
    row: Optional[Dict[str, Any]] = None


Formatter = Callable[[Any], str]
Renderer = Callable[[Any, FieldContext], DisplayWidget]


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def _is_number(value: Any) -> bool:
    # bool is an int subclass; "$True" is not a salary
    return isinstance(value, Real) and not isinstance(value, bool)


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _round_half_up(value: Any, places: int) -> Optional[Decimal]:
    """
    Round the exact binary value of a number to a fixed number of decimals,
    ties away from zero. None for NaN/inf and values too large to quantize.
    """
    try:
        if not isinstance(value, (int, float)):
            value = float(value)
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    except (InvalidOperation, OverflowError):
        return None


def parse_date(value: Any) -> Optional[date]:
    """
    Parse an ISO-like date string ("2019-03-15", "2019-03-15T09:30:00Z").
    Returns None when the value can't be read as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


# -----------------------------------------------------------------------------
# Formatters
# -----------------------------------------------------------------------------
def format_plain(value: Any) -> str:
    return _as_text(value)


def format_active(value: Any) -> str:
    return ACTIVE_LABEL if value else INACTIVE_LABEL


def format_skills(value: Any) -> str:
    if isinstance(value, (list, tuple)) and value:
        return ", ".join(str(v) for v in value)
    return NO_SKILLS_LABEL


def format_manager(value: Any) -> str:
    return NO_MANAGER_LABEL if value is None else str(value)


def format_currency(value: Any) -> str:
    """
    "$" plus the amount with thousands separators and at most three decimals;
    whole amounts print without a fraction ("$85,000").
    """
    rounded = _round_half_up(value, 3) if _is_number(value) else None
    if rounded is None:
        return _as_text(value)
    text = f"{rounded:,.3f}".rstrip("0").rstrip(".")
    return f"${text}"


def format_date(value: Any) -> str:
    """US short date, M/D/YYYY. Unparsable input is returned unchanged."""
    parsed = parse_date(value)
    if parsed is None:
        return _as_text(value)
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def format_rating(value: Any) -> str:
    """Exactly one decimal, halves rounded up (4.25 -> "4.3")."""
    rounded = _round_half_up(value, 1) if _is_number(value) else None
    if rounded is None:
        return _as_text(value)
    return f"{rounded:.1f}"


# -----------------------------------------------------------------------------
# Renderers
# -----------------------------------------------------------------------------
def render_text(formatter: Formatter) -> Renderer:
    """Wrap a formatter into a renderer producing a plain Text widget."""

    def _render(value: Any, context: FieldContext) -> DisplayWidget:
        return Text(formatter(value))

    _render.__name__ = f"render_{formatter.__name__.removeprefix('format_')}"
    return _render


def render_active(value: Any, context: FieldContext) -> DisplayWidget:
    if value:
        return Badge(ACTIVE_LABEL, tone="success")
    return Badge(INACTIVE_LABEL, tone="danger")


def truncate_skill(skill: Any) -> str:
    text = str(skill)
    if len(text) > MAX_SKILL_CHARS:
        return text[:MAX_SKILL_CHARS] + ELLIPSIS
    return text


def render_skills(value: Any, context: FieldContext) -> DisplayWidget:
    if not isinstance(value, (list, tuple)) or not value:
        return TagList(placeholder=NO_SKILLS_LABEL)

    tags = tuple(
        Tag(text=truncate_skill(skill), title=str(skill))
        for skill in value[:MAX_SKILL_TAGS]
    )
    extra = len(value) - MAX_SKILL_TAGS
    suffix = f"+{extra} more" if extra > 0 else None
    return TagList(tags=tags, suffix=suffix)


def render_manager(value: Any, context: FieldContext) -> DisplayWidget:
    return Text(format_manager(value))


# -----------------------------------------------------------------------------
# Registry
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RendererEntry:
    kind: RendererKind
    formatter: Formatter
    renderer: Renderer


class RendererRegistry:
    """
    Maps each RendererKind to its formatter/renderer pair.

    Column specs carry only the kind; the grid layer looks the functions up
    here. Entries are registered once and the same function objects are
    returned on every lookup.
    """

    def __init__(self) -> None:
        self._entries: Dict[RendererKind, RendererEntry] = {}

    def register(self, kind: RendererKind, formatter: Formatter, renderer: Renderer) -> None:
        """
        Raises:
            ValueError: if the kind is already registered
        """
        if kind in self._entries:
            raise ValueError(f"Renderer '{kind.value}' already registered")
        self._entries[kind] = RendererEntry(kind, formatter, renderer)

    def entry(self, kind: RendererKind) -> RendererEntry:
        try:
            return self._entries[kind]
        except KeyError:
            raise KeyError(f"Renderer '{kind}' not found")

    def formatter(self, kind: RendererKind) -> Formatter:
        return self.entry(kind).formatter

    def renderer(self, kind: RendererKind) -> Renderer:
        return self.entry(kind).renderer

    def kinds(self) -> List[RendererKind]:
        return list(self._entries)


def build_renderer_registry() -> RendererRegistry:
    registry = RendererRegistry()
    registry.register(RendererKind.PLAIN, format_plain, render_text(format_plain))
    registry.register(RendererKind.BOOLEAN, format_active, render_active)
    registry.register(RendererKind.STRING_LIST, format_skills, render_skills)
    registry.register(RendererKind.OPTIONAL_REFERENCE, format_manager, render_manager)
    registry.register(RendererKind.CURRENCY, format_currency, render_text(format_currency))
    registry.register(RendererKind.DATE, format_date, render_text(format_date))
    registry.register(RendererKind.RATING, format_rating, render_text(format_rating))
    logger.debug("Renderer registry built", extra={"kinds": [k.value for k in registry.kinds()]})
    return registry


@lru_cache(maxsize=None)
def default_registry() -> RendererRegistry:
    """Process-wide registry. Built on first call, shared afterwards."""
    return build_renderer_registry()
