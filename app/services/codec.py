"""
Import / export codecs.

CSV   — one visible week: `Habit,<7 ISO dates>` then one row per habit
        with `1`/`0` cells. Rows joined by `\n`, no trailing newline.
JSON  — full snapshot of {habits, checks}, 2-space indent.

`from_json` is all-or-nothing: it either returns a fully validated
AppState or raises ImportParseError / ImportShapeError.
"""
from __future__ import annotations

import json
from datetime import date
from typing import Union

from pydantic import ValidationError

from app.core.errors import ImportParseError, ImportShapeError
from app.schemas.habit import AppState, CompletionMap, Habit, ImportDocument
from app.services.week import WeekWindow, iso_date

JSON_FILENAME = "discipline-data.json"
EXPORT_MEDIA_TYPE = "text/plain;charset=utf-8"

_CSV_SPECIAL = (",", '"', "\n")


def csv_filename(week_start: date) -> str:
    return f"discipline-{iso_date(week_start)}.csv"


def escape_csv(field: str) -> str:
    """Quote a field holding a comma, quote or newline; double inner quotes."""
    if any(ch in field for ch in _CSV_SPECIAL):
        return '"' + field.replace('"', '""') + '"'
    return field


def to_csv(habits: list[Habit], checks: CompletionMap, week: WeekWindow) -> str:
    keys = [iso_date(d) for d in week.days]
    lines = [",".join(["Habit", *keys])]
    for habit in habits:
        marks = checks.get(habit.id, {})
        cells = ["1" if marks.get(k) else "0" for k in keys]
        lines.append(",".join([escape_csv(habit.name), *cells]))
    return "\n".join(lines)


def to_json(state: AppState) -> str:
    return state.model_dump_json(indent=2)


def _shape_errors(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


def from_json(text: Union[str, bytes]) -> AppState:
    """Parse and structurally validate an imported document."""
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ImportParseError(str(exc)) from exc

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ImportParseError(str(exc)) from exc

    try:
        doc = ImportDocument.model_validate(raw)
    except ValidationError as exc:
        raise ImportShapeError(_shape_errors(exc)) from exc

    return AppState(habits=doc.habits, checks=doc.checks)
