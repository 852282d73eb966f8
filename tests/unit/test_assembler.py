"""Unit tests for resume assembly."""

import pytest

from folio.contexts.templating.assembler import assemble
from folio.contexts.templating.template_data_structure import Template

pytestmark = pytest.mark.unit


def make_template(**overrides):
    record = {
        "name": "Assembly Test",
        "description": "Fragments with distinct markers",
        "header_html": "<h1>{{fullName}}</h1>",
        "contact_html": "<p class='contact'>{{email}}</p>",
        "education_title_html": "<section class='edu'><h2>Education</h2>",
        "education_item_html": "<div class='edu-item'>{{school}}: {{degree}}</div>",
        "experience_title_html": "<section class='exp'><h2>Experience</h2>",
        "experience_item_html": (
            "<div class='exp-item'>{{title}}<ul>{{#responsibilities}}<li>{{.}}</li>"
            "{{/responsibilities}}</ul></div>"
        ),
        "skills_title_html": "<section class='skills'><h2>Skills</h2>",
        "skills_item_html": "<p>{{technical}}</p>",
        "projects_title_html": "<section class='proj'><h2>Projects</h2>",
        "projects_item_html": "<div class='proj-item'>{{title}}</div>",
        "font_size": 13,
    }
    record.update(overrides)
    return Template.from_dict(record)


@pytest.fixture
def full_data():
    return {
        "fullName": "Ada Lovelace",
        "email": "ada@example.com",
        "education": [
            {"school": "University of London", "degree": "Mathematics"},
            {"school": "Home Tutoring", "degree": "Analysis"},
        ],
        "experience": [
            {"title": "Analyst", "responsibilities": ["Led team", "Shipped v2"]},
        ],
        "skills": {"technical": "Mathematics, Notation"},
        "projects": [{"title": "Analytical Engine Notes"}],
    }


class TestAssembleStructure:
    """Tests for the overall document structure."""

    def test_wrapper_and_order(self, full_data):
        html = assemble(make_template(), full_data)

        assert html.startswith('<div class="resume">')
        assert html.endswith("</div>")

        positions = [
            html.index("<style>"),
            html.index("<h1>Ada Lovelace</h1>"),
            html.index("ada@example.com"),
            html.index("class='edu'"),
            html.index("class='exp'"),
            html.index("class='skills'"),
            html.index("class='proj'"),
        ]
        assert positions == sorted(positions)

    def test_style_block_included(self, full_data):
        html = assemble(make_template(), full_data)
        assert "--font-size: 13px;" in html

    def test_header_example(self):
        html = assemble(make_template(), {"fullName": "Ada Lovelace"})
        assert "<h1>Ada Lovelace</h1>" in html
        assert html.count("<h1>") == 1

    def test_every_section_closed(self, full_data):
        html = assemble(make_template(), full_data)
        assert html.count("<section") == 4
        assert html.count("</section>") == 4

    def test_fully_resolved_output_has_no_tokens(self, full_data):
        html = assemble(make_template(), full_data)
        assert "{{" not in html
        assert "}}" not in html


class TestAssembleSections:
    """Tests for per-section behavior."""

    def test_items_rendered_per_record(self, full_data):
        html = assemble(make_template(), full_data)
        assert "<div class='edu-item'>University of London: Mathematics</div>" in html
        assert "<div class='edu-item'>Home Tutoring: Analysis</div>" in html

    def test_block_inside_item(self, full_data):
        html = assemble(make_template(), full_data)
        assert "<ul><li>Led team</li><li>Shipped v2</li></ul>" in html

    @pytest.mark.parametrize("key, marker", [("education", "edu"), ("experience", "exp"), ("projects", "proj")])
    def test_empty_list_omits_section(self, full_data, key, marker):
        full_data[key] = []
        html = assemble(make_template(), full_data)
        assert f"class='{marker}'" not in html
        assert f"class='{marker}-item'" not in html
        assert html.count("</section>") == 3

    @pytest.mark.parametrize("key, marker", [("education", "edu"), ("experience", "exp"), ("projects", "proj")])
    def test_absent_list_omits_section(self, full_data, key, marker):
        del full_data[key]
        html = assemble(make_template(), full_data)
        assert f"class='{marker}'" not in html
        assert html.count("</section>") == 3

    def test_non_list_section_value_omitted(self, full_data):
        full_data["education"] = "Self-taught"
        html = assemble(make_template(), full_data)
        assert "class='edu'" not in html

    def test_skills_rendered_against_skills_record(self, full_data):
        html = assemble(make_template(), full_data)
        assert "<p>Mathematics, Notation</p>" in html

    def test_skills_lists_joined(self, full_data):
        full_data["skills"] = {"technical": ["Python", "LaTeX"]}
        html = assemble(make_template(), full_data)
        assert "<p>Python,LaTeX</p>" in html

    def test_empty_skills_record_still_emits_section(self, full_data):
        full_data["skills"] = {}
        html = assemble(make_template(), full_data)
        assert "class='skills'" in html
        assert "<p>{{technical}}</p>" in html

    def test_empty_skills_list_still_emits_section(self, full_data):
        full_data["skills"] = []
        html = assemble(make_template(), full_data)
        assert "class='skills'" in html

    def test_absent_skills_omitted(self, full_data):
        del full_data["skills"]
        html = assemble(make_template(), full_data)
        assert "class='skills'" not in html

    def test_title_rendered_against_top_level_data(self, full_data):
        template = make_template(education_title_html="<section><h2>{{fullName}}'s Education</h2>")
        html = assemble(template, full_data)
        assert "<h2>Ada Lovelace's Education</h2>" in html

    def test_item_scope_is_record(self, full_data):
        """Top-level keys are not visible inside item fragments."""
        template = make_template(education_item_html="<div>{{school}} {{fullName}}</div>")
        html = assemble(template, full_data)
        assert "<div>University of London {{fullName}}</div>" in html


class TestAssembleProjects:
    """Tests for the optional projects section."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"projects_title_html": None},
            {"projects_item_html": None},
            {"projects_title_html": None, "projects_item_html": None},
            {"projects_title_html": ""},
        ],
    )
    def test_projects_omitted_without_both_fragments(self, full_data, overrides):
        html = assemble(make_template(**overrides), full_data)
        assert "Projects" not in html
        assert "proj-item" not in html
        assert "Analytical Engine Notes" not in html


class TestAssembleDegradation:
    """Assembly never raises; it degrades to partial output."""

    def test_missing_values_left_verbatim(self):
        html = assemble(make_template(), {"fullName": "Ada"})
        assert "<p class='contact'>{{email}}</p>" in html

    def test_record_missing_fields(self, full_data):
        full_data["education"] = [{"school": "Somewhere"}]
        html = assemble(make_template(), full_data)
        assert "<div class='edu-item'>Somewhere: {{degree}}</div>" in html

    @pytest.mark.parametrize("data", [None, {}, [], "not a mapping", 42])
    def test_non_mapping_data(self, data):
        html = assemble(make_template(), data)
        assert html.startswith('<div class="resume">')
        assert "<h1>{{fullName}}</h1>" in html
        assert "</section>" not in html

    def test_non_mapping_records(self, full_data):
        full_data["education"] = ["just a string", None, 3]
        html = assemble(make_template(), full_data)
        assert html.count("<div class='edu-item'>{{school}}: {{degree}}</div>") == 3

    def test_non_decimal_digit_path_left_verbatim(self, full_data):
        template = make_template(header_html="<h1>{{education.².school}}</h1>")
        html = assemble(template, full_data)
        assert "<h1>{{education.².school}}</h1>" in html
