"""Fixed text for SKILL.md, the definition document."""

FRONT_MATTER_FENCE = "---"

TITLE_LINE = "# {title}"
VERSION_LINE = "version: {version}"

PURPOSE_HEADING = "## Purpose"
TRIGGERS_HEADING = "## Triggers"
INPUTS_HEADING = "## Inputs"
GUARANTEES_HEADING = "## Guarantees"
NON_GOALS_HEADING = "## Non-goals"
NOTES_HEADING = "## Notes"

LIST_ITEM = "- {item}"
INPUT_ITEM = "- {key}: {value}"
