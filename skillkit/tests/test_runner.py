"""Tests for the validate/generate batch runner."""

import os

import pytest

from skillkit.core.errors import UsageError
from skillkit.orchestrator.runner import BatchRunner
from skillkit.tests.conftest import SAMPLE_DESCRIPTOR, FULL_DESCRIPTOR, write_descriptor


class TestValidateBatch:

    def test_all_valid_exit_0(self, skills_root, config, logger, capsys):
        write_descriptor(skills_root, "b", FULL_DESCRIPTOR)
        write_descriptor(skills_root, "a", SAMPLE_DESCRIPTOR)
        assert BatchRunner(config, logger).run_validate() == 0
        out = capsys.readouterr().out.strip().split("\n")
        assert out == ["OK ns.sample", "OK frontend.architecture"]

    def test_nothing_found_exit_1(self, config, logger, capsys):
        assert BatchRunner(config, logger).run_validate() == 1
        assert "Usage: skillkit validate" in capsys.readouterr().err

    def test_missing_explicit_path_exit_1(self, config, logger, tmp_path, capsys):
        missing = str(tmp_path / "ghost" / "skill.json")
        assert BatchRunner(config, logger).run_validate(missing) == 1
        assert missing in capsys.readouterr().err

    def test_failures_do_not_stop_batch(self, skills_root, config, logger, capsys):
        write_descriptor(skills_root, "a", {"id": "x.a"})
        write_descriptor(skills_root, "b", "{broken")
        write_descriptor(skills_root, "c", SAMPLE_DESCRIPTOR)
        report = BatchRunner(config, logger).validate()
        assert [item.ok for item in report.items] == [False, False, True]
        assert report.exit_code() == 2
        assert "OK ns.sample" in capsys.readouterr().out

    def test_explicit_path_validates_only_that_file(self, skills_root, config, logger):
        write_descriptor(skills_root, "a", {"id": "x.a"})
        good = write_descriptor(skills_root, "b", SAMPLE_DESCRIPTOR)
        assert BatchRunner(config, logger).run_validate(good) == 0

    def test_validate_raises_usage_error_directly(self, config, logger):
        with pytest.raises(UsageError):
            BatchRunner(config, logger).validate()


class TestGenerateBatch:

    def test_renders_every_unit(self, skills_root, config, logger, capsys):
        a = write_descriptor(skills_root, "a", SAMPLE_DESCRIPTOR)
        b = write_descriptor(skills_root, "group/b", FULL_DESCRIPTOR)
        assert BatchRunner(config, logger).run_generate() == 0
        for path in (a, b):
            unit_dir = os.path.dirname(path)
            assert os.path.isfile(os.path.join(unit_dir, "SKILL.md"))
            assert os.path.isfile(os.path.join(unit_dir, "cursor.rule.md"))
        out = capsys.readouterr().out
        assert "Generating files for 2 skill(s):" in out
        assert os.path.join("skills", "group", "b") + ": SKILL.md, cursor.rule.md" in out
        assert out.rstrip().endswith("Done.")

    def test_nothing_found_exit_1(self, config, logger, capsys):
        assert BatchRunner(config, logger).run_generate() == 1
        assert "No skill.json found" in capsys.readouterr().err

    def test_bad_unit_does_not_abort_batch(self, skills_root, config, logger):
        write_descriptor(skills_root, "a", "{broken")
        good = write_descriptor(skills_root, "b", SAMPLE_DESCRIPTOR)
        report = BatchRunner(config, logger).generate()
        assert report.passed == 1
        assert report.failed == 1
        assert report.exit_code() == 2
        assert os.path.isfile(os.path.join(os.path.dirname(good), "SKILL.md"))

    def test_explicit_path(self, skills_root, config, logger):
        write_descriptor(skills_root, "a", SAMPLE_DESCRIPTOR)
        b = write_descriptor(skills_root, "b", FULL_DESCRIPTOR)
        report = BatchRunner(config, logger).generate(b)
        assert [item.path for item in report.items] == [b]
        assert not os.path.exists(os.path.join(skills_root, "a", "SKILL.md"))


class TestEndToEnd:

    def test_sample_validates_then_renders(self, sample_path, config, logger, capsys):
        runner = BatchRunner(config, logger)
        assert runner.run_validate() == 0
        assert capsys.readouterr().out.strip() == "OK ns.sample"

        assert runner.run_generate() == 0
        with open(os.path.join(os.path.dirname(sample_path), "SKILL.md"), encoding="utf-8") as f:
            lines = f.read().split("\n")
        assert "# Sample" in lines
        assert "version: 0.1.0" in lines
        for heading, item in (("## Triggers", "- t1"), ("## Guarantees", "- g1"),
                              ("## Non-goals", "- n1")):
            assert lines[lines.index(heading) + 1] == item
