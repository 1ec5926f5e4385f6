"""Tests for the command-line entry points and their exit codes."""

import json
import os

import pytest

from skillkit.cli import main
from skillkit.tests.conftest import SAMPLE_DESCRIPTOR, write_descriptor


def _run(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # keep a developer's .env or SKILLKIT_ROOT out of the tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SKILLKIT_ROOT", raising=False)


class TestCli:

    def test_no_command_exit_1(self, capsys):
        assert _run([]) == 1

    def test_validate_ok(self, skills_root, capsys):
        write_descriptor(skills_root, "sample", SAMPLE_DESCRIPTOR)
        assert _run(["--root", skills_root, "validate"]) == 0
        assert capsys.readouterr().out.strip() == "OK ns.sample"

    def test_validate_failure_exit_2(self, skills_root, capsys):
        write_descriptor(skills_root, "bad", dict(SAMPLE_DESCRIPTOR, version="latest"))
        assert _run(["--root", skills_root, "validate"]) == 2
        assert "version must be semver x.y.z" in capsys.readouterr().err

    def test_validate_missing_path_exit_1(self, skills_root, tmp_path, capsys):
        missing = str(tmp_path / "ghost.json")
        assert _run(["--root", skills_root, "validate", missing]) == 1
        assert missing in capsys.readouterr().err

    def test_generate_then_install(self, skills_root, tmp_path):
        write_descriptor(skills_root, "sample", SAMPLE_DESCRIPTOR)
        assert _run(["--root", skills_root, "generate"]) == 0
        project = tmp_path / "app"
        assert _run(["--root", skills_root, "install", str(project), "--target", "claude"]) == 0
        assert (project / ".claude" / "skills" / "sample" / "SKILL.md").is_file()

    def test_generate_nothing_found_exit_1(self, skills_root):
        assert _run(["--root", skills_root, "generate"]) == 1

    def test_install_without_destination_exit_1(self, skills_root):
        write_descriptor(skills_root, "sample", SAMPLE_DESCRIPTOR)
        assert _run(["--root", skills_root, "install"]) == 1

    def test_default_root_is_cwd_skills(self, tmp_path, capsys):
        write_descriptor(tmp_path / "skills", "sample", SAMPLE_DESCRIPTOR)
        assert _run(["validate"]) == 0

    def test_bad_config_exit_1(self, tmp_path, capsys):
        assert _run(["--config", str(tmp_path / "missing.yaml"), "validate"]) == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_json_logs(self, skills_root, capsys):
        write_descriptor(skills_root, "sample", SAMPLE_DESCRIPTOR)
        assert _run(["--root", skills_root, "--json-logs", "validate"]) == 0
        events = [json.loads(l) for l in capsys.readouterr().out.strip().split("\n")]
        items = [e for e in events if e["event"] == "item"]
        assert [e["message"] for e in items] == ["OK ns.sample"]
        assert events[-1]["event"] == "summary"

    @pytest.mark.parametrize("target, installed", [
        ("cursor", os.path.join(".cursor", "rules", "group-reference.mdc")),
        ("claude", os.path.join(".claude", "skills", "group-reference", "SKILL.md")),
    ])
    def test_include_claude_alias(self, skills_root, tmp_path, target, installed):
        write_descriptor(skills_root, "group/sample", SAMPLE_DESCRIPTOR)
        with open(os.path.join(skills_root, "group", "CLAUDE.md"), "w", encoding="utf-8") as f:
            f.write("# Group reference\n")
        assert _run(["--root", skills_root, "generate"]) == 0

        project = tmp_path / "app"
        source = os.path.join(skills_root, "group")
        assert _run(["--root", skills_root, "install", str(project), source,
                     "--target", target, "--include-claude"]) == 0
        assert (project / installed).read_text(encoding="utf-8") == "# Group reference\n"

    def test_install_into_a_file_exit_1(self, skills_root, tmp_path, capsys):
        write_descriptor(skills_root, "sample", SAMPLE_DESCRIPTOR)
        assert _run(["--root", skills_root, "generate"]) == 0
        blocker = tmp_path / "app"
        blocker.write_text("", encoding="utf-8")
        assert _run(["--root", skills_root, "install", str(blocker)]) == 1
        assert "Cannot create" in capsys.readouterr().err
