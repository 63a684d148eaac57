"""
texresume - YAML résumé to LaTeX/PDF builder

Converts a structured YAML description of a résumé into LaTeX source and,
optionally, a compiled PDF.

Architecture:
- Templating Context: Schema loading, LaTeX escaping and template assembly
- Rendering Context: LaTeX to PDF compilation
- Session Context: Build orchestration and watch-and-rebuild loop
"""

__version__ = "0.1.0"
