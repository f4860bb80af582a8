"""Tests for form validation and the template structure checker"""

from datetime import date

import pytest
from pydantic import ValidationError

from artist_contracts.data.templates import ALL_TEMPLATES, ARTIST_AGREEMENT, ARTIST_AGREEMENT_SAMPLE_DATA
from artist_contracts.models import (
    FieldType,
    FieldValidation,
    OptionalClause,
    TemplateContent,
    TemplateField,
    TemplateFormData,
    TemplateSection,
    TemplateStructure,
)
from artist_contracts.services.validation import (
    is_blank,
    validate_field,
    validate_form_data,
    validate_template_structure,
)


def _sample_with(**overrides) -> TemplateFormData:
    fields = dict(ARTIST_AGREEMENT_SAMPLE_DATA.fields)
    fields.update(overrides)
    return TemplateFormData(fields=fields, enabled_clauses=ARTIST_AGREEMENT_SAMPLE_DATA.enabled_clauses)


# ──────────────────────────────────────────────────────────────────
# Single field rules
# ──────────────────────────────────────────────────────────────────

class TestFieldRules:

    def test_blank_values(self):
        assert is_blank(None)
        assert is_blank("")
        assert is_blank("   ")
        assert not is_blank(0)

    def test_optional_blank_is_fine(self):
        field = TemplateField(id="notes", label="Notes", type=FieldType.TEXT)
        assert validate_field(field, None) is None

    def test_required_message(self):
        field = TemplateField(id="name", label="Name", type=FieldType.TEXT, required=True)
        assert validate_field(field, "  ") == "Name is required"

    def test_min_length(self):
        field = TemplateField(
            id="code", label="Code", type=FieldType.TEXT,
            validation=FieldValidation(min_length=3),
        )
        assert validate_field(field, "ab") == "Code must be at least 3 characters"

    def test_max_length(self):
        field = TemplateField(
            id="code", label="Code", type=FieldType.TEXT,
            validation=FieldValidation(max_length=2),
        )
        assert validate_field(field, "abc") == "Code must be at most 2 characters"

    def test_pattern_custom_message(self):
        field = TemplateField(
            id="code", label="Code", type=FieldType.TEXT,
            validation=FieldValidation(pattern=r"^\d{4}$", pattern_message="Use four digits"),
        )
        assert validate_field(field, "12a4") == "Use four digits"
        assert validate_field(field, "1234") is None

    def test_pattern_default_message(self):
        field = TemplateField(
            id="code", label="Code", type=FieldType.TEXT,
            validation=FieldValidation(pattern=r"^\d+$"),
        )
        assert validate_field(field, "x") == "Code format is invalid"

    def test_length_checked_before_pattern(self):
        field = TemplateField(
            id="code", label="Code", type=FieldType.TEXT,
            validation=FieldValidation(min_length=5, pattern=r"^\d+$"),
        )
        assert validate_field(field, "ab") == "Code must be at least 5 characters"

    def test_number_bounds(self):
        field = TemplateField(
            id="split", label="Split", type=FieldType.NUMBER,
            validation=FieldValidation(min=0, max=100),
        )
        assert validate_field(field, 150) == "Split must be at most 100"
        assert validate_field(field, -1) == "Split must be at least 0"
        assert validate_field(field, "55") is None

    def test_not_a_number(self):
        field = TemplateField(id="fee", label="Fee", type=FieldType.CURRENCY)
        assert validate_field(field, "lots") == "Fee must be a number"

    def test_underscored_number_rejected(self):
        field = TemplateField(id="fee", label="Fee", type=FieldType.CURRENCY)
        assert validate_field(field, "1_000") == "Fee must be a number"
        assert validate_field(field, "1,000") is None

    def test_invalid_date(self):
        field = TemplateField(id="when", label="When", type=FieldType.DATE)
        assert validate_field(field, "someday") == "When must be a valid date"
        assert validate_field(field, "2025-01-15") is None
        assert validate_field(field, date(2025, 1, 15)) is None

    def test_select_option(self):
        territory = ARTIST_AGREEMENT.fields[-1]
        message = validate_field(territory, "mars")
        assert message.startswith("Territory must be one of: Worldwide")
        assert validate_field(territory, "uk") is None


# ──────────────────────────────────────────────────────────────────
# Whole form
# ──────────────────────────────────────────────────────────────────

class TestFormValidation:

    def test_sample_data_is_valid(self):
        result = validate_form_data(ARTIST_AGREEMENT, ARTIST_AGREEMENT_SAMPLE_DATA)
        assert result.valid
        assert result.errors == {}

    def test_missing_required_field(self):
        result = validate_form_data(ARTIST_AGREEMENT, _sample_with(party_a_name=""))
        assert not result.valid
        assert result.errors == {"party_a_name": "Party A Name is required"}

    def test_split_out_of_range(self):
        result = validate_form_data(ARTIST_AGREEMENT, _sample_with(party_a_split=150))
        assert result.errors["party_a_split"] == "Party A Revenue Share (%) must be at most 100"

    def test_disabled_clause_fields_skipped(self):
        result = validate_form_data(ARTIST_AGREEMENT, _sample_with(exclusivity_period=None))
        assert result.valid

    def test_enabled_clause_field_required(self):
        form_data = _sample_with()
        form_data.enabled_clauses.append("exclusivity")
        result = validate_form_data(ARTIST_AGREEMENT, form_data)
        assert result.errors == {
            "exclusivity_period": "Exclusivity Period (months) is required when Exclusivity is enabled"
        }

    def test_clause_field_bounds(self):
        form_data = _sample_with(exclusivity_period=0)
        form_data.enabled_clauses.append("exclusivity")
        result = validate_form_data(ARTIST_AGREEMENT, form_data)
        assert result.errors["exclusivity_period"] == "Exclusivity Period (months) must be at least 1"

    def test_enabling_clauses_never_removes_errors(self):
        partial = {"party_a_name": "Jane", "party_a_split": 120}
        without = validate_form_data(ARTIST_AGREEMENT, TemplateFormData(fields=partial))
        with_all = validate_form_data(
            ARTIST_AGREEMENT,
            TemplateFormData(
                fields=partial,
                enabled_clauses=[c.id for c in ARTIST_AGREEMENT.optional_clauses],
            ),
        )
        assert set(without.errors) <= set(with_all.errors)
        assert len(with_all.errors) > len(without.errors)

    def test_partial_structure_without_content(self):
        structure = TemplateStructure(
            fields=[TemplateField(id="name", label="Name", type=FieldType.TEXT, required=True)],
        )
        result = validate_form_data(structure, TemplateFormData())
        assert result.errors == {"name": "Name is required"}


# ──────────────────────────────────────────────────────────────────
# Template structure checker
# ──────────────────────────────────────────────────────────────────

def _structure(**overrides) -> TemplateStructure:
    data = dict(
        fields=[TemplateField(id="name", label="Name", type=FieldType.TEXT)],
        optional_clauses=[],
        content=TemplateContent(
            title="TEST AGREEMENT",
            sections=[TemplateSection(id="s1", heading="1. NAME", content="{{name}}")],
        ),
    )
    data.update(overrides)
    return TemplateStructure(**data)


class TestStructureChecker:

    @pytest.mark.parametrize("template", ALL_TEMPLATES, ids=lambda t: t.name)
    def test_built_in_templates_are_valid(self, template):
        result = validate_template_structure(template)
        assert result.valid, result.errors

    def test_minimal_structure_is_valid(self):
        assert validate_template_structure(_structure()).valid

    def test_missing_title_and_sections(self):
        result = validate_template_structure(_structure(content=TemplateContent()))
        assert "Template must have a title" in result.errors
        assert "Template must have at least one section" in result.errors

    def test_optional_section_without_clause(self):
        content = TemplateContent(
            title="T",
            sections=[TemplateSection(id="s1", heading="H", content="{{name}}", is_optional=True)],
        )
        result = validate_template_structure(_structure(content=content))
        assert "Optional section s1 must have clause_id" in result.errors

    def test_optional_section_unknown_clause(self):
        content = TemplateContent(
            title="T",
            sections=[TemplateSection(id="s1", heading="H", content="{{name}}", is_optional=True, clause_id="ghost")],
        )
        result = validate_template_structure(_structure(content=content))
        assert "Optional section s1 references unknown clause ghost" in result.errors

    def test_undeclared_variable(self):
        content = TemplateContent(
            title="T",
            sections=[TemplateSection(id="s1", heading="H", content="{{name}} {{ghost}}")],
        )
        result = validate_template_structure(_structure(content=content))
        assert result.errors == ["Variable {{ghost}} has no matching field"]

    def test_unused_field(self):
        fields = [
            TemplateField(id="name", label="Name", type=FieldType.TEXT),
            TemplateField(id="extra", label="Extra", type=FieldType.TEXT),
        ]
        result = validate_template_structure(_structure(fields=fields))
        assert result.errors == ["Field extra is never used in the content"]

    def test_duplicate_field_and_section_ids(self):
        fields = [
            TemplateField(id="name", label="Name", type=FieldType.TEXT),
            TemplateField(id="name", label="Name again", type=FieldType.TEXT),
        ]
        content = TemplateContent(
            title="T",
            sections=[
                TemplateSection(id="s1", heading="H", content="{{name}}"),
                TemplateSection(id="s1", heading="H2", content="x"),
            ],
        )
        result = validate_template_structure(_structure(fields=fields, content=content))
        assert "Duplicate field id: name" in result.errors
        assert "Duplicate section id: s1" in result.errors

    def test_clause_field_conflicts_with_main_field(self):
        clause = OptionalClause(
            id="extra",
            name="Extra",
            fields=[TemplateField(id="name", label="Name", type=FieldType.TEXT)],
        )
        result = validate_template_structure(_structure(optional_clauses=[clause]))
        assert "Clause field name conflicts with main field" in result.errors

    def test_invalid_pattern(self):
        fields = [
            TemplateField(
                id="name", label="Name", type=FieldType.TEXT,
                validation=FieldValidation(pattern="(unclosed"),
            ),
        ]
        result = validate_template_structure(_structure(fields=fields))
        assert len(result.errors) == 1
        assert result.errors[0].startswith("Field name has an invalid pattern")


class TestFormDataModel:

    def test_boolean_value_rejected(self):
        with pytest.raises(ValidationError):
            TemplateFormData.model_validate({"fields": {"advance_amount": True}})

    def test_plain_values_kept(self):
        form_data = TemplateFormData.model_validate(
            {"fields": {"advance_amount": 5000, "party_a_name": "Jane", "territory": None}}
        )
        assert form_data.fields["advance_amount"] == 5000
        assert form_data.fields["party_a_name"] == "Jane"
