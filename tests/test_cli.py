"""
Tests for CLI commands — init, types, and global options.
"""

import json
import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from reinit import main as main_module
from reinit.core.services.generators.content import materialize
from reinit.main import cli


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "boilerplate" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_unhandled_error_handler(self, monkeypatch, capsys):
        def broken():
            raise RuntimeError("kaboom")

        monkeypatch.setattr(main_module, "cli", broken)
        with pytest.raises(SystemExit) as exc:
            main_module.main()
        assert exc.value.code == 1
        err = capsys.readouterr().err
        assert "kaboom" in err
        assert "report it at https://github.com/reliverse/reinit" in err


class TestInitCommand:
    """Tests for `reinit init`."""

    def test_file_type(self, workdir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["init", "--fileType", "md:README", "--destDir", "proj"])
        assert result.exit_code == 0, result.output
        assert "created" in result.output
        assert (workdir / "proj" / "README.md").read_bytes() == materialize("md:README")

    def test_kebab_case_options(self, workdir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["init", "--file-type", "git:gitignore", "--dest-dir", "proj"])
        assert result.exit_code == 0, result.output
        assert (workdir / "proj" / ".gitignore").is_file()

    def test_invalid_file_type(self, workdir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["init", "--fileType", "md:CHANGELOG"])
        assert result.exit_code == 2
        assert "Invalid file type: md:CHANGELOG" in result.output
        assert list(workdir.iterdir()) == []

    def test_file_type_check_is_exact(self, workdir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["init", "--fileType", "md:readme"])
        assert result.exit_code == 2

    def test_concurrency_must_be_integer(self, workdir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["init", "--fileType", "md:README", "--concurrency", "many"])
        assert result.exit_code == 2

    def test_picks_type_when_omitted(self, workdir: Path):
        runner = CliRunner()
        # 9th registered type is md:README
        result = runner.invoke(cli, ["init"], input="9\n")
        assert result.exit_code == 0, result.output
        assert "Pick a file type" in result.output
        assert (workdir / "README.md").is_file()

    def test_variation_prompt(self, workdir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["init", "--fileType", "md:LICENSE"], input="2\n")
        assert result.exit_code == 0, result.output
        assert "Select variation for md:LICENSE" in result.output
        assert (workdir / "LICENSE").is_file()
        assert not (workdir / "LICENSE.md").exists()

    def test_multiple(self, workdir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["init", "--multiple", "--parallel", "--concurrency", "2"], input="7, 9\n")
        assert result.exit_code == 0, result.output
        assert (workdir / ".gitignore").is_file()
        assert (workdir / "README.md").is_file()

    def test_multiple_none_selected(self, workdir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["init", "--multiple"], input="\n")
        assert result.exit_code == 0
        assert "No file types selected" in result.output
        assert list(workdir.iterdir()) == []

    def test_injected_selector(self, workdir: Path, make_selector):
        selector = make_selector(multi=["cfg:knip", "md:README"])
        runner = CliRunner()
        result = runner.invoke(cli, ["init", "--multiple", "--json"], obj={"selector": selector})
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [d["file_type"] for d in data] == ["cfg:knip", "md:README"]
        assert all(d["status"] == "created" for d in data)

    def test_error_result_exits_nonzero(self, workdir: Path):
        (workdir / "templates").mkdir()
        runner = CliRunner()
        result = runner.invoke(cli, [
            "init", "--fileType", "git:gitignore",
            "--init-behaviour", "copy", "--src-dir", "templates",
        ])
        assert result.exit_code == 1
        assert "SourceNotFound" in result.output
        assert not (workdir / ".gitignore").exists()

    def test_copy_from_src_dir(self, workdir: Path):
        templates = workdir / "templates"
        templates.mkdir()
        (templates / ".gitignore").write_text("*.tmp\n")
        runner = CliRunner()
        result = runner.invoke(cli, [
            "init", "--fileType", "git:gitignore", "--destDir", "proj",
            "--init-behaviour", "copy", "--src-dir", "templates",
        ])
        assert result.exit_code == 0, result.output
        assert "copied" in result.output
        assert (workdir / "proj" / ".gitignore").read_text() == "*.tmp\n"

    def test_exists_behaviour_option(self, workdir: Path):
        (workdir / "README.md").write_text("keep me")
        runner = CliRunner()
        result = runner.invoke(cli, [
            "init", "--fileType", "md:README", "--exists-behaviour", "attach-index",
        ])
        assert result.exit_code == 0, result.output
        assert (workdir / "README.md").read_text() == "keep me"
        assert (workdir / "README.1.md").is_file()

    def test_config_file(self, workdir: Path):
        config = workdir / "custom.yml"
        config.write_text(textwrap.dedent("""\
            defaultDestFileExistsBehaviour: skip
        """))
        (workdir / "README.md").write_text("keep me")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "init", "--fileType", "md:README"])
        assert result.exit_code == 0, result.output
        assert "skipped" in result.output
        assert (workdir / "README.md").read_text() == "keep me"

    def test_invalid_config(self, workdir: Path):
        (workdir / "reinit.yml").write_text("parallelConcurrency: -3\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["init", "--fileType", "md:README"])
        assert result.exit_code == 1
        assert "Invalid reinit configuration" in result.output
        assert not (workdir / "README.md").exists()


class TestTypesCommand:
    def test_list(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["types"])
        assert result.exit_code == 0
        assert "md:LICENSE" in result.output
        assert "LICENSE.md, LICENSE" in result.output

    def test_json(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["types", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["cfg:reliverse"] == ["reliverse.jsonc", "reliverse.ts"]
        assert len(data) == 9
