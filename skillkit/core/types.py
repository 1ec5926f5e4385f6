"""All shared data types for the skill toolkit."""

import os
from dataclasses import dataclass, field
from typing import Optional
from enum import Enum


DESCRIPTOR_FILENAME = "skill.json"
DEFINITION_FILENAME = "SKILL.md"
RULE_FILENAME = "cursor.rule.md"
REFERENCE_FILENAME = "CLAUDE.md"

REQUIRED_FIELDS = ("id", "title", "version", "description")


class PhaseId(str, Enum):
    DISCOVER = "discover"
    VALIDATE = "validate"
    RENDER = "render"
    INSTALL = "install"


class Convention(str, Enum):
    """Target tool layout. Each member knows where units go and what they need."""

    CLAUDE = "claude"
    CURSOR = "cursor"

    @property
    def top_dir(self) -> str:
        return {"claude": ".claude", "cursor": ".cursor"}[self.value]

    @property
    def sub_dir(self) -> str:
        return {"claude": "skills", "cursor": "rules"}[self.value]

    @property
    def label(self) -> str:
        return {"claude": "Claude Code", "cursor": "Cursor"}[self.value]

    @property
    def installs_directory(self) -> bool:
        # claude takes whole skill directories, cursor takes single rule files
        return self is Convention.CLAUDE

    def required_filename(self, config: 'ToolkitConfig') -> str:
        """Rendered document a unit must have before it can be installed."""
        if self.installs_directory:
            return config.definition_filename
        return config.rule_filename


@dataclass
class Descriptor:
    id: str = ""
    title: str = ""
    version: str = ""
    description: str = ""
    triggers: list[str] = field(default_factory=list)
    inputs: dict[str, str] = field(default_factory=dict)
    guarantees: list[str] = field(default_factory=list)
    non_goals: list[str] = field(default_factory=list)
    notes: Optional[str] = None

    @property
    def short_name(self) -> str:
        return self.id.rsplit(".", 1)[-1]

    @classmethod
    def from_dict(cls, data: dict) -> 'Descriptor':
        # Filter to only known fields; null collections become empty
        known = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in known and v is not None}
        for key in ("id", "title", "version", "description"):
            if key in filtered:
                filtered[key] = str(filtered[key])
        if "notes" in filtered:
            filtered["notes"] = str(filtered["notes"])
        for key in ("triggers", "guarantees", "non_goals"):
            if key in filtered:
                filtered[key] = [str(item) for item in filtered[key]]
        if "inputs" in filtered:
            filtered["inputs"] = {str(k): str(v) for k, v in dict(filtered["inputs"]).items()}
        return cls(**filtered)


@dataclass
class ValidationResult:
    path: str
    ok: bool
    descriptor_id: Optional[str] = None
    errors: list[str] = field(default_factory=list)


@dataclass
class ItemResult:
    path: str
    ok: bool
    message: str = ""
    output_files: list[str] = field(default_factory=list)
    skipped: bool = False


@dataclass
class BatchReport:
    phase: str
    items: list[ItemResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for item in self.items if item.ok)

    @property
    def failed(self) -> int:
        return sum(1 for item in self.items if not item.ok)

    @property
    def ok(self) -> bool:
        return bool(self.items) and self.failed == 0

    def exit_code(self) -> int:
        """0 = all passed, 1 = nothing processed, 2 = at least one item failed."""
        if not self.items:
            return 1
        return 0 if self.failed == 0 else 2


@dataclass
class SkillUnit:
    dir: str
    slug: str

    def document_path(self, filename: str) -> Optional[str]:
        """Path of a generated document in the unit, or None if it has not been rendered."""
        path = os.path.join(self.dir, filename)
        return path if os.path.isfile(path) else None


@dataclass
class ToolkitConfig:
    root: str = "skills"
    descriptor_filename: str = DESCRIPTOR_FILENAME
    definition_filename: str = DEFINITION_FILENAME
    rule_filename: str = RULE_FILENAME
    reference_filename: str = REFERENCE_FILENAME
    json_logs: bool = False
    verbose: bool = False
