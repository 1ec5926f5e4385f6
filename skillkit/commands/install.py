"""CLI command: install — place generated skills into a project for Cursor or Claude Code.

Usage:
  skillkit install /path/to/my-app
  skillkit install /path/to/my-app skills/testing --include-reference
  skillkit install ~/.claude --target claude --link
"""

import os
from enum import Enum
from typing import Iterable, Optional

from ..core.errors import InstallError
from ..core.logger import SkillLogger
from ..core.types import Convention, ItemResult, PhaseId, SkillUnit, ToolkitConfig
from ..core.utils import copy_file, copy_unit_tree, entry_location, link_path, paths_overlap
from ..phases.discover import find_units, resolve_explicit_path


INSTALL_USAGE = """Usage: skillkit install <destination> [source-path] [options]
  destination:  Project root, tool directory, or exact skills/rules directory
  source-path:  e.g. skills/testing (default: the skills root)

Options:
  --target cursor|claude  Install for Cursor (default) or Claude Code
  --link, -l              Symlink instead of copy (default: copy)
  --include-reference     Also install the group's CLAUDE.md as a reference skill"""


class DestinationForm(str, Enum):
    EXACT = "exact"                # .../.claude/skills
    TOOL_ROOT = "tool_root"        # .../.claude
    PROJECT_ROOT = "project_root"  # anything else


def classify_destination(path: str, convention: Convention) -> DestinationForm:
    parts = os.path.normpath(path).split(os.sep)
    if parts[-2:] == [convention.top_dir, convention.sub_dir]:
        return DestinationForm.EXACT
    if parts[-1] == convention.top_dir:
        return DestinationForm.TOOL_ROOT
    return DestinationForm.PROJECT_ROOT


def resolve_destination(raw: str, convention: Convention) -> str:
    """Map a project root, tool root or exact target onto the install directory."""
    path = os.path.normpath(os.path.abspath(os.path.expanduser(raw)))
    form = classify_destination(path, convention)
    if form is DestinationForm.EXACT:
        return path
    if form is DestinationForm.TOOL_ROOT:
        return os.path.join(path, convention.sub_dir)
    return os.path.join(path, convention.top_dir, convention.sub_dir)


def unit_destination(unit: SkillUnit, target_dir: str, convention: Convention) -> str:
    if convention.installs_directory:
        return os.path.join(target_dir, unit.slug)
    return os.path.join(target_dir, f"{unit.slug}.mdc")


def find_overlap(dest: str, protected: Iterable[str]) -> Optional[str]:
    """Return the first protected path that dest is, contains or sits inside."""
    location = entry_location(dest)
    for path in protected:
        if paths_overlap(location, path):
            return path
    return None


def install_unit(unit: SkillUnit, dest: str, convention: Convention,
                 link: bool, config: ToolkitConfig) -> str:
    """Place one unit at dest and return a short description of what was installed."""
    if convention.installs_directory:
        if link:
            link_path(unit.dir, dest)
        else:
            copy_unit_tree(unit.dir, dest,
                           skip=(config.descriptor_filename, config.rule_filename))
        return f"{unit.slug}/ (full skill directory)"

    rule_path = unit.document_path(config.rule_filename)
    if link:
        link_path(rule_path, dest)
    else:
        copy_file(rule_path, dest)
    return f"{unit.slug}.mdc (rule file)"


def install_units(units: list[SkillUnit], target_dir: str, convention: Convention,
                  link: bool, config: ToolkitConfig,
                  logger: SkillLogger = None) -> list[ItemResult]:
    """Install each unit.

    Units lacking the convention's document, or whose destination overlaps a
    source unit, are skipped with a warning and nothing is removed.
    """
    logger = logger or SkillLogger()
    phase = PhaseId.INSTALL.value
    required = convention.required_filename(config)
    protected = [os.path.realpath(u.dir) for u in units]
    results = []

    for unit in units:
        if not unit.document_path(required):
            msg = f"  ⚠️  {unit.slug}: missing {required}, skipping"
            logger.warn(msg, phase=phase)
            results.append(ItemResult(path=unit.dir, ok=False, message=msg, skipped=True))
            continue

        dest = unit_destination(unit, target_dir, convention)
        clash = find_overlap(dest, protected)
        if clash:
            msg = f"  ⚠️  {unit.slug}: destination {dest} overlaps source {clash}, skipping"
            logger.warn(msg, phase=phase)
            results.append(ItemResult(path=unit.dir, ok=False, message=msg, skipped=True))
            continue

        try:
            installed = install_unit(unit, dest, convention, link, config)
        except OSError as e:
            msg = f"  ✗ {unit.slug}: {e}"
            logger.item_failed(phase, unit.dir, msg)
            results.append(ItemResult(path=unit.dir, ok=False, message=msg))
            continue
        msg = f"  ✓ {installed}"
        logger.item_ok(phase, unit.dir, msg)
        results.append(ItemResult(path=unit.dir, ok=True, message=msg, output_files=[dest]))

    return results


def install_reference(source: str, target_dir: str, convention: Convention,
                      link: bool, config: ToolkitConfig,
                      logger: SkillLogger = None,
                      protected: Iterable[str] = ()) -> Optional[str]:
    """Install the group-level reference document (CLAUDE.md) if the source has one.

    Returns the installed path, or None when there is nothing to install or
    the destination overlaps the reference itself or a protected path.
    """
    logger = logger or SkillLogger()
    phase = PhaseId.INSTALL.value
    reference = os.path.join(source, config.reference_filename)
    if not os.path.isfile(reference):
        logger.debug(f"No {config.reference_filename} in {source}", phase=phase)
        return None

    group = os.path.basename(os.path.normpath(source))
    if convention.installs_directory:
        dest = os.path.join(target_dir, f"{group}-reference", config.definition_filename)
        shown = f"{group}-reference/{config.definition_filename}"
    else:
        dest = os.path.join(target_dir, f"{group}-reference.mdc")
        shown = f"{group}-reference.mdc"

    clash = find_overlap(dest, [os.path.realpath(reference), *protected])
    if clash:
        logger.warn(f"  ⚠️  {shown}: destination {dest} overlaps source {clash}, skipping",
                    phase=phase)
        return None

    if link:
        link_path(reference, dest)
    else:
        copy_file(reference, dest)
    logger.info(f"  ✓ {shown} ({config.reference_filename} as reference)", phase=phase)
    return dest


def run_install(config: ToolkitConfig, destination: Optional[str],
                source: Optional[str] = None, convention: str = "cursor",
                link: bool = False, include_reference: bool = False,
                logger: SkillLogger = None) -> int:
    """Main entry point for install command.

    Returns exit code: 0 on success (skipped units included), 1 on usage,
    source or destination errors, 2 if placing any unit or the reference
    document failed on the filesystem.
    """
    logger = logger or SkillLogger(json_logs=config.json_logs, verbose=config.verbose)
    phase = PhaseId.INSTALL.value

    if not destination:
        logger.error(INSTALL_USAGE, phase=phase)
        return 1

    try:
        target = Convention(convention)
    except ValueError:
        logger.error("Error: --target must be 'cursor' or 'claude'", phase=phase)
        return 1

    source_path = resolve_explicit_path(source, config.root) if source else config.root
    try:
        units = find_units(source_path, descriptor_filename=config.descriptor_filename)
    except InstallError as e:
        logger.error(str(e), phase=phase)
        return 1

    if not units:
        logger.error(f"No skills found under {source_path}", phase=phase)
        return 1

    target_dir = resolve_destination(destination, target)
    try:
        os.makedirs(target_dir, exist_ok=True)
    except OSError as e:
        logger.error(f"Cannot create {target_dir}: {e}", phase=phase)
        return 1

    logger.info(
        f"{'Linking' if link else 'Copying'} {len(units)} skill(s) to {target_dir} ({target.label})",
        phase=phase,
    )
    results = install_units(units, target_dir, target, link, config, logger)
    failed = [r for r in results if not r.ok and not r.skipped]

    if include_reference:
        try:
            install_reference(source_path, target_dir, target, link, config, logger,
                              protected=[os.path.realpath(u.dir) for u in units])
        except OSError as e:
            logger.error(f"  ✗ {config.reference_filename}: {e}", phase=phase)
            return 2

    logger.info("Done.", phase=phase)
    return 2 if failed else 0
