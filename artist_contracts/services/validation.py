"""Form data validation and template structure checks"""

import re
from typing import Any, Optional

from artist_contracts.models.template import (
    NUMERIC_TYPES,
    TEXT_LIKE_TYPES,
    FieldType,
    FormValidationResult,
    OptionalClause,
    StructureValidationResult,
    TemplateField,
    TemplateFormData,
    TemplateStructure,
)
from artist_contracts.services.formatter import format_number, parse_date, parse_number
from artist_contracts.services.renderer import extract_variables


def is_blank(value: Any) -> bool:
    """True for values that do not count as an answer"""
    return value is None or (isinstance(value, str) and not value.strip())


def validate_field(
    field: TemplateField,
    value: Any,
    clause: Optional[OptionalClause] = None,
) -> Optional[str]:
    """Return the first rule a value breaks, or None.

    Rules run in order: required, type, length, pattern, numeric bounds.
    """
    label = field.label

    if is_blank(value):
        if not field.required:
            return None
        if clause is not None:
            return f"{label} is required when {clause.name} is enabled"
        return f"{label} is required"

    rules = field.validation

    if field.type in NUMERIC_TYPES:
        number = parse_number(value)
        if number is None:
            return f"{label} must be a number"
        if rules and rules.min is not None and number < rules.min:
            return f"{label} must be at least {format_number(rules.min)}"
        if rules and rules.max is not None and number > rules.max:
            return f"{label} must be at most {format_number(rules.max)}"
        return None

    if field.type == FieldType.DATE:
        if parse_date(value) is None:
            return f"{label} must be a valid date"
        return None

    if field.type == FieldType.SELECT:
        allowed = [option.value for option in field.options]
        if str(value) not in allowed:
            labels = ", ".join(option.label for option in field.options)
            return f"{label} must be one of: {labels}"

    if field.type in TEXT_LIKE_TYPES and rules:
        text = str(value)
        if rules.min_length is not None and len(text) < rules.min_length:
            return f"{label} must be at least {rules.min_length} characters"
        if rules.max_length is not None and len(text) > rules.max_length:
            return f"{label} must be at most {rules.max_length} characters"
        if rules.pattern and not re.search(rules.pattern, text):
            return rules.pattern_message or f"{label} format is invalid"

    return None


def validate_form_data(
    template: TemplateStructure,
    form_data: TemplateFormData,
) -> FormValidationResult:
    """Validate submitted values against a template's fields.

    Fields of clauses that are not enabled are skipped entirely, whatever
    their ``required`` flag says.
    """
    values = form_data.fields
    errors: dict[str, str] = {}

    for field in template.fields:
        message = validate_field(field, values.get(field.id))
        if message:
            errors[field.id] = message

    for clause in template.optional_clauses:
        if not form_data.is_enabled(clause.id):
            continue
        for field in clause.fields:
            message = validate_field(field, values.get(field.id), clause)
            if message and field.id not in errors:
                errors[field.id] = message

    return FormValidationResult(valid=not errors, errors=errors)


def validate_template_structure(template: TemplateStructure) -> StructureValidationResult:
    """Check a template definition for authoring mistakes"""
    errors: list[str] = []
    content = template.content

    if not content.title:
        errors.append("Template must have a title")
    if not content.sections:
        errors.append("Template must have at least one section")

    clause_ids: set[str] = set()
    for clause in template.optional_clauses:
        if not clause.name:
            errors.append(f"Clause {clause.id} missing name")
        if clause.id in clause_ids:
            errors.append(f"Duplicate clause id: {clause.id}")
        clause_ids.add(clause.id)

    section_ids: set[str] = set()
    for section in content.sections:
        if not section.id:
            errors.append("Section missing id")
        elif section.id in section_ids:
            errors.append(f"Duplicate section id: {section.id}")
        section_ids.add(section.id)
        if not section.heading:
            errors.append(f"Section {section.id or '?'} missing heading")
        if not section.content:
            errors.append(f"Section {section.id or '?'} missing content")
        if section.is_optional:
            if not section.clause_id:
                errors.append(f"Optional section {section.id or '?'} must have clause_id")
            elif section.clause_id not in clause_ids:
                errors.append(
                    f"Optional section {section.id} references unknown clause {section.clause_id}"
                )

    field_ids: set[str] = set()
    for field in template.fields:
        if field.id in field_ids:
            errors.append(f"Duplicate field id: {field.id}")
        field_ids.add(field.id)

    all_field_ids = set(field_ids)
    for clause in template.optional_clauses:
        for field in clause.fields:
            if field.id in field_ids:
                errors.append(f"Clause field {field.id} conflicts with main field")
            elif field.id in all_field_ids:
                errors.append(f"Clause field {field.id} is declared by more than one clause")
            all_field_ids.add(field.id)

    for field in template.all_fields():
        pattern = field.validation.pattern if field.validation else None
        if pattern:
            try:
                re.compile(pattern)
            except re.error as e:
                errors.append(f"Field {field.id} has an invalid pattern: {e}")

    variables = extract_variables(content)
    for variable in variables:
        if variable not in all_field_ids:
            errors.append(f"Variable {{{{{variable}}}}} has no matching field")
    for field_id in sorted(all_field_ids - set(variables)):
        errors.append(f"Field {field_id} is never used in the content")

    return StructureValidationResult(valid=not errors, errors=errors)
