"""
Templating Registries

Centralized registry for loading and caching Jinja2 templates.
"""

from pathlib import Path
from typing import Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

TEMPLATE_PATH = Path(__file__).parent / "template"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for LaTeX generation.

    Templates are stored in texresume/contexts/templating/template/{name}.tex.jinja
    and use custom delimiters to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>
    """

    def __init__(self, template_path: Path = None):
        """
        Initialize the template registry.

        Args:
            template_path: Directory containing *.tex.jinja files. Defaults to
                           the templates shipped with the package
        """
        if template_path is None:
            template_path = TEMPLATE_PATH

        self.template_path = template_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(template_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Custom delimiters to avoid LaTeX brace conflicts
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            # Preserve whitespace (important for LaTeX)
            trim_blocks=False,
            lstrip_blocks=False,
            keep_trailing_newline=False,
            autoescape=False,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without extension (e.g., 'role')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        try:
            template = self.env.get_template(f"{name}.tex.jinja")
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{name}' not found at {self.get_template_file(name)}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_file(self, name: str) -> Path:
        """Get the file path for a named template."""
        return self.template_path / f"{name}.tex.jinja"

    def render(self, template_name: str, **context) -> str:
        """
        Render a named template with the given variables.

        Templates may use a variable called `name` (section and contact do).
        """
        return self.get_template(template_name).render(**context)

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """Check if a template is in the cache."""
        return name in self._cache
