"""Template rendering: placeholder substitution, variable extraction and
clause-aware section assembly"""

import re
from typing import Any, Mapping, Optional

from artist_contracts.models.template import (
    FieldType,
    RenderedDocument,
    RenderedSection,
    TemplateContent,
    TemplateFormData,
    TemplateStructure,
)
from artist_contracts.services.formatter import format_value

PLACEHOLDER_RE = re.compile(r"\{\{([A-Za-z0-9_]+)\}\}")


def substitute_variables(
    text: str,
    values: Mapping[str, Any],
    field_types: Optional[Mapping[str, FieldType]] = None,
) -> str:
    """Replace {{name}} placeholders with formatted values.

    Placeholders whose value is missing or None are left as-is so callers can
    spot incomplete data. Substituted text is not scanned again.
    """
    field_types = field_types or {}

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        value = values.get(name)
        if value is None:
            return match.group(0)
        return format_value(value, field_types.get(name))

    return PLACEHOLDER_RE.sub(_replace, text)


def extract_variables(content: TemplateContent) -> list[str]:
    """List distinct variable names in order of first appearance.

    Scans the title, then each section's heading and content.
    """
    texts = [content.title]
    for section in content.sections:
        texts.append(section.heading)
        texts.append(section.content)

    found: dict[str, None] = {}
    for text in texts:
        for name in PLACEHOLDER_RE.findall(text):
            found.setdefault(name, None)
    return list(found)


def find_unresolved(text: str) -> list[str]:
    """Names of placeholders still present in rendered text"""
    return list(dict.fromkeys(PLACEHOLDER_RE.findall(text)))


def render_template_content(
    template: TemplateStructure,
    form_data: TemplateFormData,
) -> RenderedDocument:
    """Assemble the document for the given form data.

    Optional sections are kept only when their clause is enabled; declared
    order is preserved. No validation happens here, so unfilled values stay
    visible as {{placeholders}}.
    """
    values = form_data.fields
    field_types = template.field_types()

    sections = [
        RenderedSection(
            heading=substitute_variables(section.heading, values, field_types),
            content=substitute_variables(section.content, values, field_types),
        )
        for section in template.content.sections
        if not section.is_optional or form_data.is_enabled(section.clause_id)
    ]

    return RenderedDocument(
        title=substitute_variables(template.content.title, values, field_types),
        sections=sections,
    )
