"""Fixed text for cursor.rule.md, the editor rule document."""

TITLE_LINE = "# {title} (Cursor rule)"
SCOPE_LINE = "scope: project"
VERSION_LINE = "version: {version}"

TRIGGERS_LEAD = "Apply this rule when the user asks to:"
GUARANTEES_LEAD = "When generating or editing output, apply these constraints:"
AVOID_LEAD = "Avoid:"

METADATA_HEADING = "# metadata"
ID_LINE = "id: {id}"

LIST_ITEM = "- {item}"
