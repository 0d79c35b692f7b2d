from __future__ import annotations

from datetime import date

import pytest

from emp_grid.core.renderers import (
    Badge,
    FieldContext,
    RendererKind,
    RendererRegistry,
    TagList,
    Text,
    build_renderer_registry,
    default_registry,
    format_currency,
    format_date,
    format_rating,
    format_skills,
    render_active,
    render_manager,
    render_skills,
)


def _ctx(field: str = "skills") -> FieldContext:
    return FieldContext(field=field)


# -----------------------------------------------------------------------------
# isActive
# -----------------------------------------------------------------------------
def test_active_renderer_has_exactly_two_states():
    outputs = {render_active(v, _ctx("isActive")) for v in (True, False)}

    assert outputs == {Badge("Active", "success"), Badge("Inactive", "danger")}


def test_active_renderer_falsy_values_are_inactive():
    for value in (None, 0, "", []):
        assert render_active(value, _ctx("isActive")).text == "Inactive"


# -----------------------------------------------------------------------------
# skills
# -----------------------------------------------------------------------------
def test_skills_truncates_and_adds_more_suffix():
    widget = render_skills(["Python Programming", "SQL", "Leadership", "Docker"], _ctx())

    assert isinstance(widget, TagList)
    assert widget.texts == ["Python Programm...", "SQL", "Leadership"]
    assert widget.suffix == "+1 more"
    # full value stays available on hover
    assert widget.tags[0].title == "Python Programming"


@pytest.mark.parametrize("value", [[], (), None, "Python", 42, {"a": 1}])
def test_skills_placeholder_for_empty_or_non_list(value):
    widget = render_skills(value, _ctx())

    assert widget.placeholder == "No skills"
    assert widget.tags == ()
    assert widget.suffix is None


def test_skills_up_to_three_entries_all_shown_without_suffix():
    skills = ["Go", "exactly15chars!", "Rust"]
    widget = render_skills(skills, _ctx())

    assert widget.texts == skills
    assert widget.suffix is None


def test_skills_suffix_counts_remaining_entries():
    skills = [f"skill-{i}" for i in range(8)]
    widget = render_skills(skills, _ctx())

    assert len(widget.tags) == 3
    assert widget.suffix == "+5 more"


def test_skills_widget_serialises_for_grid():
    data = render_skills(["A", "B"], _ctx()).to_dict()

    assert data == {
        "kind": "tags",
        "tags": [{"text": "A", "title": "A"}, {"text": "B", "title": "B"}],
        "suffix": None,
        "placeholder": None,
    }


def test_format_skills_joins_or_placeholder():
    assert format_skills(["SQL", "Docker"]) == "SQL, Docker"
    assert format_skills([]) == "No skills"
    assert format_skills(None) == "No skills"


# -----------------------------------------------------------------------------
# manager
# -----------------------------------------------------------------------------
def test_manager_none_and_verbatim():
    assert render_manager(None, _ctx("manager")) == Text("None")
    assert render_manager("Jane Doe", _ctx("manager")) == Text("Jane Doe")
    assert render_manager("", _ctx("manager")) == Text("")


# -----------------------------------------------------------------------------
# salary / hireDate / performanceRating
# -----------------------------------------------------------------------------
def test_currency_formatting():
    assert format_currency(85000) == "$85,000"
    assert format_currency(1234567.5) == "$1,234,567.5"
    assert format_currency(0) == "$0"


def test_currency_whole_floats_print_like_integers():
    assert format_currency(85000.0) == "$85,000"
    assert format_currency(100.10) == "$100.1"


def test_currency_caps_fraction_at_three_digits():
    assert format_currency(1234.56789) == "$1,234.568"
    assert format_currency(0.0005) == "$0.001"
    assert format_currency(2.0004) == "$2"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("n/a", "n/a"),
        (None, ""),
        (True, "True"),
        ([1, 2], "[1, 2]"),
        (float("nan"), "nan"),
        (float("inf"), "inf"),
        (1e40, "1e+40"),
    ],
)
def test_currency_never_raises_on_bad_input(value, expected):
    assert format_currency(value) == expected


def test_date_formatting_short_us():
    assert format_date("2019-03-05") == "3/5/2019"
    assert format_date("2019-03-05T09:30:00Z") == "3/5/2019"
    assert format_date(date(2020, 12, 31)) == "12/31/2020"


@pytest.mark.parametrize("value", ["not a date", "2019-13-45", ""])
def test_date_unparsable_rendered_as_is(value):
    assert format_date(value) == value


def test_rating_halves_round_up():
    assert [format_rating(4.25), format_rating(3.75), format_rating(2.25)] == ["4.3", "3.8", "2.3"]
    assert format_rating(0.15) == "0.1"  # 0.15 is stored just below the half


def test_rating_one_decimal():
    assert format_rating(4) == "4.0"
    assert format_rating(3.25) == "3.3"
    assert format_rating(4.96) == "5.0"
    assert format_rating("great") == "great"
    assert format_rating(None) == ""


# -----------------------------------------------------------------------------
# Registry
# -----------------------------------------------------------------------------
def test_registry_covers_every_kind():
    registry = build_renderer_registry()

    assert set(registry.kinds()) == set(RendererKind)


def test_registry_dispatch():
    registry = build_renderer_registry()

    assert registry.formatter(RendererKind.CURRENCY)(1000) == "$1,000"
    assert registry.renderer(RendererKind.RATING)(4.25, _ctx("performanceRating")) == Text("4.3")
    assert registry.renderer(RendererKind.PLAIN)(None, _ctx("email")) == Text("")


def test_registry_rejects_duplicate_registration():
    registry = RendererRegistry()
    registry.register(RendererKind.PLAIN, str, lambda v, c: Text(str(v)))

    with pytest.raises(ValueError):
        registry.register(RendererKind.PLAIN, str, lambda v, c: Text(str(v)))


def test_registry_unknown_kind_raises_keyerror():
    with pytest.raises(KeyError):
        RendererRegistry().renderer(RendererKind.DATE)


def test_default_registry_is_stable():
    first = default_registry()
    second = default_registry()

    assert first is second
    assert first.renderer(RendererKind.STRING_LIST) is second.renderer(RendererKind.STRING_LIST)


def test_registry_accessors_return_registered_functions():
    registry = build_renderer_registry()

    assert registry.formatter(RendererKind.CURRENCY) is format_currency
    assert registry.renderer(RendererKind.BOOLEAN) is render_active
