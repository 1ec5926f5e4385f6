"""Render: turn a validated descriptor into SKILL.md and cursor.rule.md."""

import os

import yaml

from ..core.logger import SkillLogger
from ..core.types import Descriptor, ItemResult, PhaseId, ToolkitConfig
from ..core.utils import write_file, display_path
from ..core.errors import DescriptorParseError
from ..templates import skill_md, rule_md
from .validate import load_descriptor, check_descriptor


def render_front_matter(descriptor: Descriptor) -> list[str]:
    """YAML header other tools read to index the skill (name + description)."""
    body = yaml.safe_dump(
        {"name": descriptor.short_name, "description": descriptor.description},
        sort_keys=False, allow_unicode=True, default_flow_style=False, width=1 << 16,
    )
    return [skill_md.FRONT_MATTER_FENCE, *body.rstrip("\n").split("\n"),
            skill_md.FRONT_MATTER_FENCE]


def _items(template: str, values: list[str]) -> list[str]:
    return [template.format(item=v) for v in values]


def render_definition(descriptor: Descriptor, include_header: bool = True) -> str:
    lines = []
    if include_header:
        lines.extend(render_front_matter(descriptor))
    lines.append(skill_md.TITLE_LINE.format(title=descriptor.title))
    lines.append(skill_md.VERSION_LINE.format(version=descriptor.version))
    lines.append("")
    lines.append(skill_md.PURPOSE_HEADING)
    lines.append(descriptor.description)
    lines.append("")
    lines.append(skill_md.TRIGGERS_HEADING)
    lines.extend(_items(skill_md.LIST_ITEM, descriptor.triggers))
    lines.append("")
    lines.append(skill_md.INPUTS_HEADING)
    lines.extend(skill_md.INPUT_ITEM.format(key=k, value=v) for k, v in descriptor.inputs.items())
    lines.append("")
    lines.append(skill_md.GUARANTEES_HEADING)
    lines.extend(_items(skill_md.LIST_ITEM, descriptor.guarantees))
    lines.append("")
    lines.append(skill_md.NON_GOALS_HEADING)
    lines.extend(_items(skill_md.LIST_ITEM, descriptor.non_goals))
    lines.append("")
    lines.append(skill_md.NOTES_HEADING)
    if descriptor.notes:
        lines.append(descriptor.notes)
    return "\n".join(lines) + "\n"


def render_rule(descriptor: Descriptor) -> str:
    lines = [
        rule_md.TITLE_LINE.format(title=descriptor.title),
        rule_md.SCOPE_LINE,
        rule_md.VERSION_LINE.format(version=descriptor.version),
        "",
        rule_md.TRIGGERS_LEAD,
    ]
    lines.extend(_items(rule_md.LIST_ITEM, descriptor.triggers))
    lines.append("")
    lines.append(rule_md.GUARANTEES_LEAD)
    lines.extend(_items(rule_md.LIST_ITEM, descriptor.guarantees))
    if descriptor.notes:
        lines.append("")
        lines.append(descriptor.notes)
    if descriptor.non_goals:
        lines.append("")
        lines.append(rule_md.AVOID_LEAD)
        lines.extend(_items(rule_md.LIST_ITEM, descriptor.non_goals))
    lines.append("")
    lines.append(rule_md.METADATA_HEADING)
    lines.append(rule_md.ID_LINE.format(id=descriptor.id))
    return "\n".join(lines) + "\n"


def render_unit(path: str, config: ToolkitConfig, logger: SkillLogger = None) -> ItemResult:
    """Validate one descriptor, then write both documents beside it.

    Invalid descriptors are reported and left unrendered; existing documents
    are overwritten in full.
    """
    logger = logger or SkillLogger()
    phase = PhaseId.RENDER.value
    unit_dir = os.path.dirname(os.path.abspath(path))
    shown = display_path(unit_dir, os.path.dirname(config.root))

    try:
        data = load_descriptor(path)
        problems = check_descriptor(data)
        if problems:
            msg = f"{path}: not rendered: {'; '.join(problems)}"
            logger.item_failed(phase, path, msg)
            return ItemResult(path=path, ok=False, message=msg)

        descriptor = Descriptor.from_dict(data)
        definition_path = os.path.join(unit_dir, config.definition_filename)
        rule_path = os.path.join(unit_dir, config.rule_filename)
        write_file(definition_path, render_definition(descriptor))
        write_file(rule_path, render_rule(descriptor))
    except DescriptorParseError as e:
        logger.item_failed(phase, path, str(e))
        return ItemResult(path=path, ok=False, message=str(e))
    except Exception as e:
        msg = f"{path}: render failed: {e}"
        logger.item_failed(phase, path, msg)
        return ItemResult(path=path, ok=False, message=msg)

    msg = f"  {shown}: {config.definition_filename}, {config.rule_filename}"
    logger.item_ok(phase, path, msg)
    return ItemResult(path=path, ok=True, message=msg,
                      output_files=[definition_path, rule_path])
