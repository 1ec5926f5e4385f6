"""Validate: parse a skill.json and check required fields and version shape."""

import json
import re
from typing import Any

from ..core.errors import DescriptorParseError
from ..core.logger import SkillLogger
from ..core.types import REQUIRED_FIELDS, PhaseId, ValidationResult
from ..core.utils import read_json


SEMVER_PREFIX = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+")

MISSING_FIELDS_MSG = "missing required fields: {fields}"
BAD_VERSION_MSG = "version must be semver x.y.z"


def load_descriptor(path: str) -> dict:
    """Read and parse one descriptor. Raises DescriptorParseError."""
    try:
        data = read_json(path)
    except json.JSONDecodeError as e:
        raise DescriptorParseError(path, f"invalid JSON: {e}")
    except UnicodeDecodeError as e:
        raise DescriptorParseError(path, f"not UTF-8 text: {e}")
    except OSError as e:
        raise DescriptorParseError(path, f"cannot read descriptor: {e.strerror or e}")
    if not isinstance(data, dict):
        raise DescriptorParseError(path, "descriptor must be a JSON object")
    return data


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def is_semver(version: Any) -> bool:
    return isinstance(version, str) and SEMVER_PREFIX.match(version) is not None


def check_descriptor(data: dict) -> list[str]:
    """Return problems with a parsed descriptor; empty means valid.

    Missing fields are listed in the order id, title, version, description.
    The version shape is only checked when a version is present.
    """
    errors = []
    missing = [name for name in REQUIRED_FIELDS if _is_blank(data.get(name))]
    if missing:
        errors.append(MISSING_FIELDS_MSG.format(fields=", ".join(missing)))
    if "version" not in missing and not is_semver(data.get("version")):
        errors.append(BAD_VERSION_MSG)
    return errors


def validate_descriptor(path: str, logger: SkillLogger = None) -> ValidationResult:
    """Validate one descriptor file. Never raises; failures come back in the result."""
    logger = logger or SkillLogger()
    phase = PhaseId.VALIDATE.value

    try:
        data = load_descriptor(path)
    except DescriptorParseError as e:
        logger.item_failed(phase, path, str(e))
        return ValidationResult(path=path, ok=False, errors=[str(e)])

    descriptor_id = None if _is_blank(data.get("id")) else str(data["id"])
    problems = check_descriptor(data)
    if problems:
        errors = [f"{path}: {p}" for p in problems]
        for msg in errors:
            logger.item_failed(phase, path, msg)
        return ValidationResult(path=path, ok=False, descriptor_id=descriptor_id, errors=errors)

    logger.item_ok(phase, path, f"OK {descriptor_id}")
    return ValidationResult(path=path, ok=True, descriptor_id=descriptor_id)
