"""Tests for the command-line interface"""

import json

import pytest
from typer.testing import CliRunner

from artist_contracts.cli.main import app
from artist_contracts.data.templates import ARTIST_AGREEMENT_SAMPLE_DATA

runner = CliRunner()

ARTIST = "Artist Collaboration Agreement"


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.json"
    path.write_text(json.dumps(ARTIST_AGREEMENT_SAMPLE_DATA.model_dump(mode="json")), encoding="utf-8")
    return path


@pytest.fixture
def seeded():
    result = runner.invoke(app, ["seed"])
    assert result.exit_code == 0, result.output


class TestSetupCommands:

    def test_init(self):
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0, result.output
        assert "Initialization complete" in result.output

    def test_seed_json(self):
        result = runner.invoke(app, ["seed", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert len(data["created"]) == 5

        again = json.loads(runner.invoke(app, ["seed", "--json"]).stdout)
        assert again["created"] == []
        assert len(again["skipped"]) == 5

    def test_check_built_in_templates(self):
        result = runner.invoke(app, ["check"])
        assert result.exit_code == 0, result.output
        assert result.output.count("[OK]") == 5


class TestTemplateCommands:

    def test_templates_json(self, seeded):
        result = runner.invoke(app, ["templates", "--json"])
        assert result.exit_code == 0, result.output
        names = [t["name"] for t in json.loads(result.stdout)]
        assert names[0] == ARTIST
        assert len(names) == 5

    def test_templates_by_category(self, seeded):
        result = runner.invoke(app, ["templates", "--category", "licensing", "--json"])
        assert [t["name"] for t in json.loads(result.stdout)] == ["Music License Agreement"]

    def test_templates_empty_database(self):
        result = runner.invoke(app, ["templates"])
        assert result.exit_code == 0
        assert "No templates available" in result.output

    def test_template_by_name(self, seeded):
        result = runner.invoke(app, ["template", ARTIST.lower(), "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["name"] == ARTIST

    def test_template_fields_table(self, seeded):
        result = runner.invoke(app, ["template", ARTIST, "--fields"])
        assert result.exit_code == 0, result.output
        assert "Optional Clauses" in result.output

    def test_unknown_template(self, seeded):
        result = runner.invoke(app, ["template", "nope"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_variables(self, seeded):
        result = runner.invoke(app, ["variables", ARTIST, "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)[0] == "effective_date"


class TestFormCommands:

    def test_validate_sample(self, seeded, sample_file):
        result = runner.invoke(app, ["validate", ARTIST, "--data", str(sample_file)])
        assert result.exit_code == 0, result.output
        assert "valid" in result.output

    def test_validate_errors(self, seeded, tmp_path):
        data = tmp_path / "empty.json"
        data.write_text('{"form_data": {"fields": {}}}', encoding="utf-8")

        result = runner.invoke(app, ["validate", ARTIST, "--data", str(data), "--json"])
        assert result.exit_code == 1
        body = json.loads(result.stdout)
        assert body["valid"] is False
        assert body["errors"]["party_a_name"] == "Party A Name is required"

    def test_validate_bad_json(self, seeded, tmp_path):
        data = tmp_path / "broken.json"
        data.write_text("{not json", encoding="utf-8")
        result = runner.invoke(app, ["validate", ARTIST, "--data", str(data)])
        assert result.exit_code == 1

    def test_render_text(self, seeded, sample_file):
        result = runner.invoke(app, ["render", ARTIST, "--data", str(sample_file)])
        assert result.exit_code == 0, result.output
        assert "ARTIST COLLABORATION AGREEMENT" in result.stdout
        assert "Party A: 50%" in result.stdout

    def test_render_warning_kept_off_stdout(self, seeded, tmp_path):
        data = ARTIST_AGREEMENT_SAMPLE_DATA.model_dump(mode="json")
        del data["fields"]["party_a_name"]
        path = tmp_path / "partial.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        result = runner.invoke(app, ["render", ARTIST, "--data", str(path)])
        assert result.exit_code == 0
        assert result.stdout.startswith("=" * 60)
        assert "Unfilled placeholders" not in result.stdout
        assert "party_a_name" in result.stderr

    def test_render_html_to_file(self, seeded, sample_file, tmp_path):
        output = tmp_path / "out" / "contract.html"
        result = runner.invoke(app, [
            "render", ARTIST, "--data", str(sample_file),
            "--format", "html", "--output", str(output), "--no-styles",
        ])
        assert result.exit_code == 0, result.output
        html = output.read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>")
        assert "<style>" not in html

    def test_render_bad_format(self, seeded, sample_file):
        result = runner.invoke(app, ["render", ARTIST, "--data", str(sample_file), "--format", "pdf"])
        assert result.exit_code == 1

    def test_sample(self):
        result = runner.invoke(app, ["sample"])
        assert result.exit_code == 0, result.output
        assert "3. REVENUE SHARING" in result.stdout
        assert "Party B: 50%" in result.stdout
