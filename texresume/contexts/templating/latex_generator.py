"""
LaTeX Generator

Converts a validated Resume into a LaTeX document.

Composition primitives:
- itemize: list environment around pre-escaped lines
- role: bold title, subtitle and right-aligned trailer above a bulleted list.
  Shared by education, experience and project entries.
- section: titled list of rendered entries

Free-text fields are escaped exactly once, in the convert_* methods. The
primitives receive escaped text and never escape it again; their spacing and
label parameters are LaTeX directives and are inserted verbatim.
"""

from typing import List, Sequence

from texresume.contexts.templating.defaults import (
    DATE_RANGE_SEPARATOR,
    GITHUB_URL_PREFIX,
    ITEMIZE_TOPSEP,
    ROLE_ITEMIZE,
    SECTION_ITEMIZE,
)
from texresume.contexts.templating.logger import log_document_generated
from texresume.contexts.templating.registries import TemplateRegistry
from texresume.contexts.templating.resume_data_structure import (
    Contact,
    Education,
    Experience,
    Project,
    Resume,
    Skill,
)
from texresume.utils.latex_escaping import escape_latex, escape_lines
from texresume.utils.text_processing import set_max_consecutive_blank_lines


class ResumeToLaTeXConverter:
    """Converts Resume data structures to LaTeX format."""

    def __init__(self, template_registry: TemplateRegistry = None):
        self.template_registry = template_registry or TemplateRegistry()

    # Composition primitives

    def itemize(self, items: Sequence[str], leftmargin: str, itemsep: str, label: str) -> str:
        """
        Render pre-escaped lines as an itemize environment.

        Args:
            items: Escaped LaTeX lines, one per item, in display order
            leftmargin: enumitem leftmargin directive (e.g., "*", "0cm")
            itemsep: enumitem itemsep directive (e.g., "-0.7em")
            label: enumitem label directive (e.g., "\\textbullet")

        Returns:
            LaTeX itemize environment, or "" when there are no items
            (LaTeX rejects an itemize environment without any item)
        """
        if not items:
            return ""

        return self.template_registry.render(
            "itemize",
            items=list(items),
            leftmargin=leftmargin,
            itemsep=itemsep,
            label=label,
            topsep=ITEMIZE_TOPSEP,
        )

    def role(self, title: str, subtitle: str, trailer: str, items: Sequence[str]) -> str:
        """
        Render a role block: header line followed by a bulleted list.

        All arguments must already be escaped. The header reads
        "\\textbf{title}, subtitle \\hfill trailer".
        """
        bullets = self.itemize(items, **ROLE_ITEMIZE)
        return self.template_registry.render(
            "role", title=title, subtitle=subtitle, trailer=trailer, items=bullets
        )

    def section(self, name: str, items: Sequence[str]) -> str:
        """
        Render a section heading followed by its rendered entries.

        Args:
            name: Section title (escaped here)
            items: Already rendered role or skill fragments
        """
        entries = self.itemize(items, **SECTION_ITEMIZE)
        return self.template_registry.render("section", name=escape_latex(name), items=entries)

    # Entity conversion

    def convert_contact(self, contact: Contact) -> str:
        """Convert the contact header to a centered block."""
        return self.template_registry.render(
            "contact",
            name=escape_latex(contact.name),
            email=escape_latex(contact.email),
            github=escape_latex(contact.github),
            github_prefix=GITHUB_URL_PREFIX,
        )

    def convert_education(self, education: Education) -> str:
        return self.role(
            escape_latex(education.program),
            escape_latex(education.institution),
            escape_latex(education.graduation),
            escape_lines(education.description),
        )

    def convert_experience(self, experience: Experience) -> str:
        begin = escape_latex(experience.begin)
        end = escape_latex(experience.end)
        return self.role(
            escape_latex(experience.position),
            escape_latex(experience.company),
            f"{begin} {DATE_RANGE_SEPARATOR} {end}",
            escape_lines(experience.description),
        )

    def convert_project(self, project: Project) -> str:
        return self.role(
            escape_latex(project.title),
            escape_latex(project.category),
            escape_latex(project.github),
            escape_lines(project.description),
        )

    def convert_skill(self, skill: Skill) -> str:
        return self.template_registry.render(
            "skill",
            area=escape_latex(skill.area),
            description=escape_latex(skill.description),
        )

    def generate_sections(self, resume: Resume) -> List[str]:
        """Render the Education, Experience, Projects and Skills sections, in that order."""
        return [
            self.section("Education", [self.convert_education(e) for e in resume.education]),
            self.section("Experience", [self.convert_experience(e) for e in resume.experience]),
            self.section("Projects", [self.convert_project(p) for p in resume.projects]),
            self.section("Skills", [self.convert_skill(s) for s in resume.skills]),
        ]

    def generate_document(self, resume: Resume) -> str:
        """
        Generate complete LaTeX document.

        Fixed preamble, contact block, the four sections and the closing
        \\end{document}, with runs of blank lines collapsed to one.

        Args:
            resume: Validated résumé

        Returns:
            Complete LaTeX document string ending in a newline
        """
        generated_latex = self.template_registry.render(
            "document",
            contact=self.convert_contact(resume.contact),
            sections=self.generate_sections(resume),
        )

        document = set_max_consecutive_blank_lines(generated_latex, max_consecutive=1).strip() + "\n"
        log_document_generated(len(document), document.count("\n"))
        return document


_default_converter = None


def _converter() -> ResumeToLaTeXConverter:
    global _default_converter
    if _default_converter is None:
        _default_converter = ResumeToLaTeXConverter()
    return _default_converter


def itemize(items: Sequence[str], leftmargin: str, itemsep: str, label: str) -> str:
    """Render pre-escaped lines as an itemize environment (see ResumeToLaTeXConverter.itemize)."""
    return _converter().itemize(items, leftmargin, itemsep, label)


def role(title: str, subtitle: str, trailer: str, items: Sequence[str]) -> str:
    """Render a role block from pre-escaped fields (see ResumeToLaTeXConverter.role)."""
    return _converter().role(title, subtitle, trailer, items)


def section(name: str, items: Sequence[str]) -> str:
    """Render a titled section around rendered entries (see ResumeToLaTeXConverter.section)."""
    return _converter().section(name, items)


def to_document(resume: Resume) -> str:
    """Convert a résumé to a complete LaTeX document."""
    return _converter().generate_document(resume)
