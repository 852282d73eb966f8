"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest

from folio.contexts.templating.defaults import TemplateCategory
from folio.contexts.templating.exceptions import InvalidTemplateError, TemplateNotFoundError
from folio.contexts.templating.template_registry import TemplateRegistry

TEMPLATE_YAML = """\
name: {name}
description: Registry test template
category: {category}
tags: {tags}
is_public: {is_public}
header_html: <h1>{{{{fullName}}}}</h1>
contact_html: <p>{{{{email}}}}</p>
education_title_html: <section><h2>Education</h2>
education_item_html: <div>{{{{school}}}}</div>
experience_title_html: <section><h2>Experience</h2>
experience_item_html: <div>{{{{title}}}}</div>
skills_title_html: {skills_title}
skills_item_html: <p>{{{{technical}}}}</p>
"""


def write_template(
    directory: Path,
    template_id: str,
    name: str,
    category: str = "PROFESSIONAL",
    tags: str = "[Modern]",
    is_public: str = "true",
    skills_title: str = "<section><h2>Skills</h2>",
) -> Path:
    path = directory / f"{template_id}.yaml"
    path.write_text(
        TEMPLATE_YAML.format(
            name=name,
            category=category,
            tags=tags,
            is_public=is_public,
            skills_title=skills_title,
        )
    )
    return path


@pytest.fixture
def templates_dir(tmp_path):
    write_template(tmp_path, "bold", "Bold", category="CREATIVE", tags="[Bold, Design]")
    write_template(tmp_path, "academic", "Academic CV", category="ACADEMIC", tags="[Research]")
    write_template(tmp_path, "classic", "Classic", tags="[Classic, modern]")
    write_template(tmp_path, "draft", "Draft", is_public="false")
    return tmp_path


@pytest.mark.unit
def test_template_registry_init(templates_dir):
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry(templates_dir)
    assert registry.templates_path == templates_dir
    assert registry._cache == {}


@pytest.mark.unit
def test_default_path_holds_builtin_templates():
    """The default registry points at the packaged templates."""
    registry = TemplateRegistry()
    ids = registry.list_template_ids()
    assert "professional_classic" in ids
    assert "minimal" in ids


@pytest.mark.unit
def test_get_template(templates_dir):
    registry = TemplateRegistry(templates_dir)
    template = registry.get_template("bold")

    assert template.template_id == "bold"
    assert template.name == "Bold"
    assert template.category is TemplateCategory.CREATIVE
    assert template.header_html == "<h1>{{fullName}}</h1>"


@pytest.mark.unit
def test_template_caching(templates_dir):
    """Test that templates are cached after first load."""
    registry = TemplateRegistry(templates_dir)

    template1 = registry.get_template("classic")
    assert registry.is_cached("classic")

    template2 = registry.get_template("classic")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found(templates_dir):
    """Test error handling for missing template."""
    registry = TemplateRegistry(templates_dir)

    with pytest.raises(TemplateNotFoundError) as exc_info:
        registry.get_template("nonexistent")

    assert exc_info.value.template_id == "nonexistent"
    assert "classic" in exc_info.value.available
    assert isinstance(exc_info.value, FileNotFoundError)


@pytest.mark.unit
def test_get_template_invalid(tmp_path):
    write_template(tmp_path, "broken", "Broken", category="UNKNOWN")
    registry = TemplateRegistry(tmp_path)

    with pytest.raises(InvalidTemplateError) as exc_info:
        registry.get_template("broken")

    assert exc_info.value.template_path == tmp_path / "broken.yaml"
    assert not registry.is_cached("broken")


@pytest.mark.unit
def test_get_template_path(templates_dir):
    """Test getting template file path."""
    registry = TemplateRegistry(templates_dir)
    path = registry.get_template_path("classic")

    assert isinstance(path, Path)
    assert path.name == "classic.yaml"


@pytest.mark.unit
def test_clear_cache(templates_dir):
    """Test cache clearing."""
    registry = TemplateRegistry(templates_dir)

    registry.get_template("classic")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_list_template_ids(templates_dir):
    registry = TemplateRegistry(templates_dir)
    assert registry.list_template_ids() == ["academic", "bold", "classic", "draft"]


@pytest.mark.unit
def test_list_template_ids_missing_directory(tmp_path):
    registry = TemplateRegistry(tmp_path / "nope")
    assert registry.list_template_ids() == []


@pytest.mark.unit
def test_list_templates_public_sorted_by_name(templates_dir):
    registry = TemplateRegistry(templates_dir)
    names = [t.name for t in registry.list_templates()]
    assert names == ["Academic CV", "Bold", "Classic"]


@pytest.mark.unit
def test_list_templates_include_private(templates_dir):
    registry = TemplateRegistry(templates_dir)
    names = [t.name for t in registry.list_templates(public_only=False)]
    assert "Draft" in names


@pytest.mark.unit
def test_list_templates_by_category(templates_dir):
    registry = TemplateRegistry(templates_dir)

    assert [t.name for t in registry.list_templates(category="ACADEMIC")] == ["Academic CV"]
    assert [t.name for t in registry.list_templates(category=TemplateCategory.CREATIVE)] == [
        "Bold"
    ]


@pytest.mark.unit
def test_list_templates_unknown_category(templates_dir):
    registry = TemplateRegistry(templates_dir)
    with pytest.raises(ValueError):
        registry.list_templates(category="FUNKY")


@pytest.mark.unit
def test_list_templates_by_tags_any_match_case_insensitive(templates_dir):
    registry = TemplateRegistry(templates_dir)

    names = [t.name for t in registry.list_templates(tags=["MODERN", "research"])]
    assert names == ["Academic CV", "Classic"]


@pytest.mark.unit
def test_uncoupled_title_logs_warning(tmp_path, caplog_loguru):
    write_template(tmp_path, "loose", "Loose", skills_title="<div><h2>Skills</h2>")
    TemplateRegistry(tmp_path).get_template("loose")

    assert any("skills_title_html" in message for message in caplog_loguru)
