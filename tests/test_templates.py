"""Tests for the jinja2 template engine wrapper."""

from pathlib import Path

import pytest

from realm_codegen.codegen.core.templates import TemplateError, create_template_engine


def test_render_string_with_filters() -> None:
    engine = create_template_engine()

    rendered = engine.render_string(
        "{{ name | camel_case }} {{ name | pascal_case }}", {"name": "user_profile"}
    )

    assert rendered == "userProfile UserProfile"


def test_in_memory_template() -> None:
    engine = create_template_engine()
    engine.add_template("import.j2", "import {{ module }}")

    assert engine.template_exists("import.j2")
    assert engine.render_template("import.j2", {"module": "RealmSwift"}) == "import RealmSwift"


def test_block_tags_do_not_leave_blank_lines() -> None:
    engine = create_template_engine()
    engine.add_template(
        "imports.j2",
        "{% for module in modules %}\nimport {{ module }}\n{% endfor %}\n",
    )

    rendered = engine.render_template("imports.j2", {"modules": ["Realm", "RealmSwift"]})

    assert rendered == "import Realm\nimport RealmSwift\n"


def test_templates_from_directory(tmp_path: Path) -> None:
    (tmp_path / "header.j2").write_text("// {{ title }}", encoding="utf-8")

    engine = create_template_engine(tmp_path)

    assert engine.template_exists("header.j2")
    assert engine.render_template("header.j2", {"title": "Models"}) == "// Models"


def test_missing_template() -> None:
    engine = create_template_engine()

    assert not engine.template_exists("missing.j2")
    with pytest.raises(TemplateError, match="not found"):
        engine.render_template("missing.j2", {})


def test_broken_template_string() -> None:
    with pytest.raises(TemplateError):
        create_template_engine().render_string("{% for %}", {})
