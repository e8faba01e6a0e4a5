from __future__ import annotations
from typing import Optional

from ubl2cii.mapper.errors import ErrorLevel, ErrorList


def conversion_report_md(errors: ErrorList, document_id: Optional[str] = None) -> str:
    title = "# Conversion Report"
    if document_id:
        title += f" ({document_id})"
    lines = [title, ""]
    if not errors.issues:
        lines.append("No issues")
        return "\n".join(lines) + "\n"
    for level, heading in ((ErrorLevel.ERROR, "Errors"), (ErrorLevel.WARNING, "Warnings")):
        issues = [i for i in errors if i.level is level]
        if not issues:
            continue
        lines.append(f"## {heading}")
        for i in issues:
            lines.append(f"- {i.field_path}: {i.message}")
        lines.append("")
    return "\n".join(lines).rstrip("\n") + "\n"
