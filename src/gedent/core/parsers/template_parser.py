"""
Template Parser Module

Splits raw template text into a header and a body.

Template layout:

    --@
    extension = "inp"
    --@
    ! {{ method }} {{ basis_set }}
    ...

The lines between the two markers are TOML and hold the output file options.
Everything outside the header is the body handed to the renderer. A template
without markers is all body and gets default options.
"""

import logging
import tomllib
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple
from gedent.core.constants import Constants
from gedent.core.errors import TemplateHeaderError
from gedent.core.builders.template_renderer import render


@dataclass(frozen=True)
class TemplateOptions:
    extension: Optional[str] = None

    # Keys recognized in the header; anything else is ignored unless strict.
    KNOWN_KEYS = ("extension",)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], strict: bool = False) -> "TemplateOptions":
        """
        Builds options from the parsed header mapping.

        Unknown keys are logged and ignored; with strict=True they are rejected.
        """
        unknown = sorted(set(data) - set(cls.KNOWN_KEYS))
        if unknown:
            if strict:
                raise TemplateHeaderError(f"Unknown template option(s): {', '.join(unknown)}")
            logging.warning(f"Ignoring unknown template option(s): {', '.join(unknown)}")

        extension = data.get("extension")
        if extension is not None and not isinstance(extension, str):
            raise TemplateHeaderError(
                f"Template option 'extension' must be a string, got {type(extension).__name__}")
        return cls(extension=extension)


def _parse_header(header_text: str, strict: bool) -> TemplateOptions:
    try:
        data = tomllib.loads(header_text)
    except tomllib.TOMLDecodeError as e:
        raise TemplateHeaderError(f"Malformed template header: {e}") from e
    return TemplateOptions.from_mapping(data, strict=strict)


def compile_template(template_text: str, strict: bool = False) -> Tuple[str, TemplateOptions]:
    """
    Splits template text into its body and header options.

    Args:
        template_text: Raw template text
        strict: Reject unknown header keys instead of ignoring them

    Returns:
        Tuple of (body, options)

    Raises:
        TemplateHeaderError: if the header is not closed, appears more than
            once, or does not parse as TOML
    """
    lines = template_text.splitlines(keepends=True)
    marker_lines = [i for i, line in enumerate(lines) if Constants.HEADER_MARKER in line]

    if not marker_lines:
        return template_text, TemplateOptions()
    if len(marker_lines) != 2:
        raise TemplateHeaderError(
            f"Template header needs exactly two '{Constants.HEADER_MARKER}' marker lines, "
            f"found {len(marker_lines)} (lines {', '.join(str(i + 1) for i in marker_lines)})")

    start, end = marker_lines
    header_lines: List[str] = [line.rstrip("\r\n") for line in lines[start + 1:end]]
    body = "".join(lines[:start] + lines[end + 1:])

    options = _parse_header("\n".join(header_lines), strict)
    return body, options


@dataclass(frozen=True)
class Template:
    name: str
    body: str
    options: TemplateOptions = field(default_factory=TemplateOptions)

    @classmethod
    def from_text(cls, name: str, template_text: str, strict: bool = False) -> "Template":
        body, options = compile_template(template_text, strict=strict)
        return cls(name=name, body=body, options=options)

    def render(self, context: Mapping[str, Any]) -> str:
        return render(self.body, context, name=self.name)

