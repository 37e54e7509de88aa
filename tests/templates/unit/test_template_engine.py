"""Template engine tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from wsdl_codegen.core.templates import (
    TemplateEngine,
    TemplateError,
    get_default_template_engine,
)


def test_render_string_applies_comment_filter() -> None:
    engine = TemplateEngine()

    rendered = engine.render_string("{{ text | comment }}", {"text": "first\n\nsecond"})

    assert rendered == "; first\n;\n; second"


def test_comment_filter_accepts_custom_marker() -> None:
    engine = TemplateEngine()

    rendered = engine.render_string("{{ text | comment('#') }}", {"text": "note"})

    assert rendered == "# note"


def test_add_template_makes_it_available() -> None:
    engine = TemplateEngine()
    assert engine.template_exists("greeting.txt") is False

    engine.add_template("greeting.txt", "hello {{ name }}")

    assert engine.template_exists("greeting.txt") is True
    assert engine.render_template("greeting.txt", {"name": "world"}) == "hello world"


def test_templates_load_from_directory(tmp_path: Path) -> None:
    (tmp_path / "line.txt").write_text("{{ key }} = {{ value }}", encoding="utf-8")

    engine = TemplateEngine(template_dir=tmp_path)

    assert engine.render_template("line.txt", {"key": "a", "value": "b"}) == "a = b"


def test_missing_template_raises_template_error() -> None:
    engine = TemplateEngine()

    with pytest.raises(TemplateError, match="missing.txt"):
        engine.render_template("missing.txt", {})


def test_broken_template_string_raises_template_error() -> None:
    engine = TemplateEngine()

    with pytest.raises(TemplateError):
        engine.render_string("{% for x in %}", {})


def test_default_engine_ships_classmap_template() -> None:
    engine = get_default_template_engine()

    assert engine is get_default_template_engine()
    assert engine.template_exists("classmap.ini") is True
