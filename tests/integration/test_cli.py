"""
Integration tests for the vellum CLI.
"""

import json

import pytest
from typer.testing import CliRunner

from vellum import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch, reset_logger):
    """Keep session logs out of the working tree."""
    monkeypatch.setattr(cli, "LOGS_PATH", tmp_path / "logs")


@pytest.fixture
def jane_doe_file(tmp_path, jane_doe):
    path = tmp_path / "jane.json"
    path.write_text(json.dumps(jane_doe))
    return path


@pytest.mark.integration
def test_no_command_shows_help():
    result = runner.invoke(cli.app, [])

    assert result.exit_code == 0
    assert "render" in result.output
    assert "templates" in result.output


@pytest.mark.integration
def test_render_json_to_file(tmp_path, jane_doe_file):
    output = tmp_path / "out" / "jane.json"

    result = runner.invoke(
        cli.app, ["render", str(jane_doe_file), "--template", "classic", "--format", "json", "-o", str(output)]
    )

    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["template_id"] == "classic"
    assert data["layout"] == "single-column"
    assert [block["kind"] for block in data["regions"][0]["blocks"]] == ["paragraph", "category_list"]


@pytest.mark.integration
def test_render_html_with_variant(tmp_path, jane_doe_file):
    output = tmp_path / "jane.html"

    result = runner.invoke(
        cli.app, ["render", str(jane_doe_file), "-t", "classic", "--variant", "1", "-o", str(output)]
    )

    assert result.exit_code == 0, result.output
    html = output.read_text(encoding="utf-8")
    assert "Jane Doe" in html
    assert "#1E3A8A" in html


@pytest.mark.integration
def test_render_writes_session_log(tmp_path, jane_doe_file):
    runner.invoke(cli.app, ["render", str(jane_doe_file), "-t", "classic", "-o", str(tmp_path / "x.html")])

    logs = list((tmp_path / "logs").glob("render_*/render.log"))
    assert len(logs) == 1


@pytest.mark.integration
def test_render_unknown_template_exits_1(jane_doe_file):
    result = runner.invoke(cli.app, ["render", str(jane_doe_file), "-t", "nonexistent"])

    assert result.exit_code == 1


@pytest.mark.integration
def test_render_incomplete_bespoke_content_exits_1(jane_doe_file):
    result = runner.invoke(cli.app, ["render", str(jane_doe_file), "-t", "tech-modern"])

    assert result.exit_code == 1


@pytest.mark.integration
def test_render_missing_content_file_exits_1(tmp_path):
    result = runner.invoke(cli.app, ["render", str(tmp_path / "missing.yaml"), "-t", "classic"])

    assert result.exit_code == 1


@pytest.mark.integration
def test_render_unparseable_content_file_exits_1(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"name": "Jane Doe", "sections": [')

    result = runner.invoke(cli.app, ["render", str(path), "-t", "classic"])

    assert result.exit_code == 1
    assert "could not be parsed" in result.output


@pytest.mark.integration
def test_preview_to_file(tmp_path):
    output = tmp_path / "preview.html"

    result = runner.invoke(cli.app, ["preview", "tech-modern", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "JORDAN LEE" in output.read_text(encoding="utf-8")


@pytest.mark.integration
def test_preview_without_sample_exits_1():
    result = runner.invoke(cli.app, ["preview", "minimalist"])

    assert result.exit_code == 1


@pytest.mark.integration
def test_templates_lists_catalog():
    result = runner.invoke(cli.app, ["templates"])

    assert result.exit_code == 0
    assert "6 templates" in result.output
    assert "tech-modern" in result.output


@pytest.mark.integration
def test_templates_filters():
    by_category = runner.invoke(cli.app, ["templates", "--category", "healthcare"])
    by_search = runner.invoke(cli.app, ["templates", "--search", "nothing-matches-this"])
    popular = runner.invoke(cli.app, ["templates", "--popular", "2"])

    assert "1 templates" in by_category.output
    assert "healthcare-modern" in by_category.output
    assert "No templates match." in by_search.output
    assert "2 templates" in popular.output
    assert "classic" not in popular.output
