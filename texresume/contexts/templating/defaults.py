"""
Fixed layout directives for generated résumés.

These values are LaTeX rendering directives, not content, and are inserted
into templates without escaping.
"""

# Spacing for the outer list that holds the entries of a section
SECTION_ITEMIZE = {
    "leftmargin": "0cm",
    "itemsep": "-0.0em",
    "label": "{}",
}

# Spacing for the bulleted description list under a role header
ROLE_ITEMIZE = {
    "leftmargin": "*",
    "itemsep": "-0.7em",
    "label": r"\textbullet",
}

# Shared by every itemize environment
ITEMIZE_TOPSEP = "-2em"

# Section names, in document order
SECTION_ORDER = ["Education", "Experience", "Projects", "Skills"]

# Separator between experience begin and end dates
DATE_RANGE_SEPARATOR = "--"

# Prefix placed before the GitHub handle in the contact block
GITHUB_URL_PREFIX = "github.com/"
