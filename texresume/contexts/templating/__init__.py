"""
Templating Context

Responsibilities:
- Defines and validates the résumé schema
- Escapes free text for LaTeX
- Assembles LaTeX fragments and the full document from Jinja2 templates

Owns: Résumé data structure, YAML → LaTeX conversion, LaTeX templates
Never: Compiles LaTeX or touches output files
"""

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
    load_resume_file,
)

__all__ = [
    # Assembly
    "ResumeToLaTeXConverter",
    "itemize",
    "role",
    "section",
    "to_document",
    # Data structures and loading
    "Resume",
    "Contact",
    "Education",
    "Experience",
    "Project",
    "Skill",
    "load_resume",
    "load_resume_file",
]
