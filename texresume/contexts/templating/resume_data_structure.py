"""
Résumé Data Structure

Defines the canonical résumé schema and loads it from YAML.

Schema (every field required, unknown keys rejected):

    contact:    {name, email, github}
    education:  [{program, institution, graduation, description: [str]}]
    experience: [{position, company, begin, end, description: [str]}]
    projects:   [{title, category, github, description: [str]}]
    skills:     [{area, description}]

Validation is done with OmegaConf structured configs: the YAML is merged onto
the dataclass schema, which rejects unknown keys and mistyped values, and
converted back to dataclass instances, which rejects missing values. Free text
is carried through verbatim: OmegaConf interpolation ("${...}") is never applied
to résumé content.
"""

import dataclasses
import datetime
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, List

import yaml
from omegaconf import MISSING, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from texresume.exceptions import FileReadError, SchemaError

# Unicode private-use area; one unused character stands in for "$" during validation
PLACEHOLDER_CODEPOINTS = range(0xE000, 0xF900)


@dataclass
class Contact:
    """
    Contact header of the résumé.

    Attributes:
        name: Full name
        email: Email address
        github: GitHub handle (rendered after "github.com/")
    """

    name: str = MISSING
    email: str = MISSING
    github: str = MISSING


@dataclass
class Education:
    """
    Education entry, rendered as a role block.

    Attributes:
        program: Degree or program name (role title)
        institution: Institution name (role subtitle)
        graduation: Graduation date, free text (role trailer)
        description: Ordered description lines
    """

    program: str = MISSING
    institution: str = MISSING
    graduation: str = MISSING
    description: List[str] = MISSING


@dataclass
class Experience:
    """
    Work experience entry, rendered as a role block.

    Attributes:
        position: Job title (role title)
        company: Employer (role subtitle)
        begin: Start date, free text
        end: End date, free text (e.g., "present")
        description: Ordered description lines
    """

    position: str = MISSING
    company: str = MISSING
    begin: str = MISSING
    end: str = MISSING
    description: List[str] = MISSING


@dataclass
class Project:
    """
    Project entry, rendered as a role block.

    Attributes:
        title: Project name (role title)
        category: Kind of project (role subtitle)
        github: Repository reference (role trailer)
        description: Ordered description lines
    """

    title: str = MISSING
    category: str = MISSING
    github: str = MISSING
    description: List[str] = MISSING


@dataclass
class Skill:
    """Skill area with a one-line description."""

    area: str = MISSING
    description: str = MISSING


@dataclass
class Resume:
    """
    Complete résumé.

    Parsed once per build and discarded after rendering; never mutated.
    """

    contact: Contact = MISSING
    education: List[Education] = MISSING
    experience: List[Experience] = MISSING
    projects: List[Project] = MISSING
    skills: List[Skill] = MISSING


def _text_values(value: Any) -> Iterator[str]:
    """Yield every string (keys included) in parsed YAML data."""
    if isinstance(value, dict):
        for key, item in value.items():
            yield str(key)
            yield from _text_values(item)
    elif isinstance(value, list):
        for item in value:
            yield from _text_values(item)
    elif isinstance(value, str):
        yield value


def _dollar_placeholder(data: Any) -> str:
    """Pick a private-use character that does not occur anywhere in data."""
    text = "".join(_text_values(data))
    for codepoint in PLACEHOLDER_CODEPOINTS:
        if chr(codepoint) not in text:
            return chr(codepoint)
    raise SchemaError("Résumé uses every private-use character; cannot protect '$' text")


def _prepare_values(value: Any, placeholder: str) -> Any:
    """
    Make parsed YAML safe to hand to OmegaConf.

    YAML timestamps are turned back into text so they validate as string
    fields, and "$" in string values is replaced by placeholder so OmegaConf
    never sees "${...}" as an interpolation.
    """
    if isinstance(value, dict):
        return {key: _prepare_values(item, placeholder) for key, item in value.items()}
    if isinstance(value, list):
        return [_prepare_values(item, placeholder) for item in value]
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, str):
        return value.replace("$", placeholder)
    return value


def _restore_values(value: Any, placeholder: str) -> Any:
    """Undo the "$" replacement on validated dataclass instances, in place."""
    if isinstance(value, str):
        return value.replace(placeholder, "$")
    if isinstance(value, list):
        return [_restore_values(item, placeholder) for item in value]
    if dataclasses.is_dataclass(value):
        for field in dataclasses.fields(value):
            setattr(value, field.name, _restore_values(getattr(value, field.name), placeholder))
    return value


def load_resume(text: str, source: Path = None) -> Resume:
    """
    Parse and validate résumé YAML.

    Args:
        text: YAML document
        source: Path the text was read from, used in error messages

    Returns:
        Validated Resume instance

    Raises:
        SchemaError: If the YAML is malformed, is not a mapping, or does not
                     match the schema (missing field, unknown field, wrong type)
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaError(f"Invalid YAML: {e}", path=source) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SchemaError(
            f"Résumé YAML must be a mapping at root level, got {type(data).__name__}",
            path=source,
        )

    placeholder = _dollar_placeholder(data)
    try:
        schema = OmegaConf.structured(Resume)
        merged = OmegaConf.merge(schema, OmegaConf.create(_prepare_values(data, placeholder)))
        resume = OmegaConf.to_object(merged)
    except OmegaConfBaseException as e:
        message = str(e).replace(placeholder, "$")
        raise SchemaError(f"Résumé does not match schema: {message}", path=source) from e

    return _restore_values(resume, placeholder)


def load_resume_file(path: Path) -> Resume:
    """
    Read and validate a résumé YAML file.

    Raises:
        FileReadError: If the file cannot be read or is not UTF-8
        SchemaError: If the content does not match the schema
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"Cannot read résumé source: {e}", path=path) from e

    return load_resume(text, source=path)
