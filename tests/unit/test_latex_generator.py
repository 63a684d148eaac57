"""Unit tests for LaTeX document assembly."""

import pytest

from texresume.contexts.templating.latex_generator import (
    ResumeToLaTeXConverter,
    itemize,
    role,
    section,
    to_document,
)
from texresume.contexts.templating.resume_data_structure import (
    Contact,
    Education,
    Experience,
    Project,
    Resume,
    Skill,
    load_resume,
)


@pytest.fixture
def minimal_resume():
    """One entry per section."""
    return Resume(
        contact=Contact(name="Jane Doe", email="jane@example.com", github="janedoe"),
        education=[
            Education(
                program="BSc Physics",
                institution="Uni",
                graduation="2019",
                description=["Top 5%"],
            )
        ],
        experience=[
            Experience(
                position="Engineer",
                company="Acme",
                begin="2020",
                end="2022",
                description=["Did X", "Did Y"],
            )
        ],
        projects=[
            Project(
                title="texresume",
                category="Tooling",
                github="janedoe/texresume",
                description=["Wrote it"],
            )
        ],
        skills=[Skill(area="Languages", description="Python, C#")],
    )


@pytest.mark.unit
def test_itemize_renders_items_in_order():
    latex = itemize(["A", "B"], "0cm", "-0.0em", "{}")

    assert latex == (
        "\\begin{itemize}[leftmargin=0cm, topsep=-2em, itemsep=-0.0em, label={}]\n"
        "\\item A\n"
        "\\item B\n"
        "\\end{itemize}"
    )


@pytest.mark.unit
def test_itemize_directives_are_not_escaped():
    latex = itemize(["A"], "*", "-0.7em", r"\textbullet")
    assert r"leftmargin=*, topsep=-2em, itemsep=-0.7em, label=\textbullet]" in latex


@pytest.mark.unit
def test_itemize_without_items_is_empty():
    assert itemize([], "0cm", "0em", "{}") == ""


@pytest.mark.unit
def test_role_header_and_items():
    latex = role("Engineer", "Acme", "2020--2022", ["Did X", "Did Y"])
    lines = latex.splitlines()

    assert lines[0] == r"\textbf{Engineer}, Acme \hfill 2020--2022"
    assert lines[1].startswith(r"\begin{itemize}[leftmargin=*")
    assert lines[2:4] == [r"\item Did X", r"\item Did Y"]
    assert lines[-1] == r"\end{itemize}"
    assert latex.count(r"\item ") == 2


@pytest.mark.unit
def test_role_does_not_escape_its_inputs():
    """Inputs are pre-escaped; escaping again would double the backslashes."""
    latex = role(r"R\&D", "Lab", "2020", [r"Top 5\%"])
    assert r"\textbf{R\&D}" in latex
    assert r"\item Top 5\%" in latex
    assert "textbackslash" not in latex


@pytest.mark.unit
def test_role_without_description_has_no_list():
    assert role("Engineer", "Acme", "2020", []) == r"\textbf{Engineer}, Acme \hfill 2020"


@pytest.mark.unit
def test_section_heading_and_entries():
    latex = section("Experience", ["first", "second"])

    assert latex.startswith("\n\\section{Experience}\n")
    assert "leftmargin=0cm" in latex
    assert "\\item first\n\\item second" in latex


@pytest.mark.unit
def test_section_name_is_escaped():
    assert r"\section{R\&D}" in section("R&D", [])


@pytest.mark.unit
def test_experience_trailer_is_date_range():
    converter = ResumeToLaTeXConverter()
    latex = converter.convert_experience(
        Experience(position="Dev", company="Co", begin="Jan 2020", end="present", description=[])
    )
    assert latex == r"\textbf{Dev}, Co \hfill Jan 2020 -- present"


@pytest.mark.unit
def test_entities_escape_free_text():
    converter = ResumeToLaTeXConverter()

    education = converter.convert_education(
        Education(program="B_Sc", institution="A&M", graduation="2019", description=["GPA 4/4 (100%)"])
    )
    assert r"\textbf{B\_Sc}, A\&M \hfill 2019" in education
    assert r"\item GPA 4/4 (100\%)" in education

    project = converter.convert_project(
        Project(title="t", category="c", github="me/repo_name", description=[])
    )
    assert r"\hfill me/repo\_name" in project

    skill = converter.convert_skill(Skill(area="Langs", description="C#, F#"))
    assert skill == r"\textbf{Langs}:\ {C\#, F\#}"


@pytest.mark.unit
def test_contact_block():
    converter = ResumeToLaTeXConverter()
    latex = converter.convert_contact(Contact(name="Jane Doe", email="j@x.io", github="jane_d"))

    assert latex.splitlines() == [
        r"\begin{center}",
        r"{\Huge\textbf{Jane Doe}} \\[.8em]",
        r"j@x.io \hspace{2em} github.com/jane\_d",
        r"\end{center}",
    ]


@pytest.mark.unit
def test_document_structure_and_order(minimal_resume):
    document = to_document(minimal_resume)

    assert document.startswith(r"\documentclass[12pt,a4paper]{article}")
    assert r"\titleformat{\section}{\large\bf}{}{0cm}{}[\titlerule\vspace{-0.5em}]" in document
    assert document.endswith("\\end{document}\n")

    markers = [
        r"\begin{document}",
        r"\begin{center}",
        r"\section{Education}",
        r"\section{Experience}",
        r"\section{Projects}",
        r"\section{Skills}",
        r"\end{document}",
    ]
    for marker in markers:
        assert document.count(marker) == 1, marker
    positions = [document.index(marker) for marker in markers]
    assert positions == sorted(positions)


@pytest.mark.unit
def test_document_contains_rendered_entries(minimal_resume):
    document = to_document(minimal_resume)

    assert r"\textbf{BSc Physics}, Uni \hfill 2019" in document
    assert r"\item Top 5\%" in document
    assert r"\textbf{Engineer}, Acme \hfill 2020 -- 2022" in document
    assert r"\hfill janedoe/texresume" in document
    assert r"\textbf{Languages}:\ {Python, C\#}" in document


@pytest.mark.unit
def test_document_has_no_double_blank_lines(minimal_resume):
    assert "\n\n\n" not in to_document(minimal_resume)


@pytest.mark.unit
def test_empty_sections_keep_their_heading():
    resume = Resume(
        contact=Contact(name="A", email="a@b.c", github="a"),
        education=[],
        experience=[],
        projects=[],
        skills=[],
    )
    document = to_document(resume)

    for name in ["Education", "Experience", "Projects", "Skills"]:
        assert f"\\section{{{name}}}" in document
    assert r"\begin{itemize}" not in document


@pytest.mark.unit
def test_dollar_brace_text_reaches_document_escaped():
    resume = load_resume(
        """
contact: {name: "Jane ${name}", email: j@x.io, github: jane}
education: []
experience: []
projects: []
skills:
  - area: Templates
    description: "like ${contact.email}"
"""
    )
    document = to_document(resume)

    assert r"{\Huge\textbf{Jane \$\{name\}}}" in document
    assert r"\textbf{Templates}:\ {like \$\{contact.email\}}" in document
