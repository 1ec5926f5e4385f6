"""Batch runner: discover descriptors, then validate or render each one in order."""

from typing import Optional

from ..core.types import BatchReport, ItemResult, PhaseId, ToolkitConfig
from ..core.logger import SkillLogger
from ..core.errors import UsageError
from ..phases.discover import find_descriptor_paths
from ..phases.validate import validate_descriptor
from ..phases.render import render_unit


VALIDATE_USAGE = (
    "Usage: skillkit validate [path/to/skill.json]\n"
    "  No path: validate all skills under {root}"
)
GENERATE_USAGE = (
    "No skill.json found. Use: skillkit generate [path/to/skill.json] "
    "or add {root}/*/skill.json"
)


class BatchRunner:
    def __init__(self, config: ToolkitConfig, logger: Optional[SkillLogger] = None):
        self.config = config
        self.logger = logger or SkillLogger(json_logs=config.json_logs, verbose=config.verbose)

    def _discover(self, single_path: Optional[str], usage: str) -> list[str]:
        paths = find_descriptor_paths(
            self.config.root, single_path,
            descriptor_filename=self.config.descriptor_filename,
        )
        if not paths:
            raise UsageError(usage.format(root=self.config.root))
        self.logger.debug(f"Discovered {len(paths)} descriptor(s) under {self.config.root}",
                          phase=PhaseId.DISCOVER.value)
        return paths

    def validate(self, single_path: Optional[str] = None) -> BatchReport:
        """Validate every discovered descriptor. Failures never stop the batch.

        Raises UsageError when there is nothing to validate.
        """
        phase = PhaseId.VALIDATE.value
        paths = self._discover(single_path, VALIDATE_USAGE)
        report = BatchReport(phase=phase)
        for path in paths:
            result = validate_descriptor(path, self.logger)
            report.items.append(ItemResult(
                path=path, ok=result.ok,
                message=f"OK {result.descriptor_id}" if result.ok else "; ".join(result.errors),
            ))
        self.logger.phase_complete(phase, "Validate", report.passed, report.failed)
        return report

    def generate(self, single_path: Optional[str] = None) -> BatchReport:
        """Render SKILL.md and cursor.rule.md for every discovered descriptor.

        Raises UsageError when there is nothing to render.
        """
        phase = PhaseId.RENDER.value
        paths = self._discover(single_path, GENERATE_USAGE)
        report = BatchReport(phase=phase)
        self.logger.phase_start(phase, "Generating files for", len(paths))
        for path in paths:
            report.items.append(render_unit(path, self.config, self.logger))
        self.logger.phase_complete(phase, "Generate", report.passed, report.failed)
        if report.ok:
            self.logger.info("Done.", phase=phase)
        return report

    def run_validate(self, single_path: Optional[str] = None) -> int:
        """Returns exit code: 0=all valid, 1=usage error, 2=validation failures."""
        try:
            report = self.validate(single_path)
        except UsageError as e:
            self.logger.error(str(e), phase=PhaseId.VALIDATE.value)
            return 1
        return report.exit_code()

    def run_generate(self, single_path: Optional[str] = None) -> int:
        """Returns exit code: 0=all rendered, 1=usage error, 2=some units failed."""
        try:
            report = self.generate(single_path)
        except UsageError as e:
            self.logger.error(str(e), phase=PhaseId.RENDER.value)
            return 1
        return report.exit_code()
