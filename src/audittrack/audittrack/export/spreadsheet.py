from __future__ import annotations

import csv
import io
from typing import Iterable

import pandas as pd

from ..entries.model import TimeEntry

# Same order as the TimeEntry attributes.
EXPORT_COLUMNS = [
    ("id", "ID"),
    ("collaborator_id", "ID Collaborateur"),
    ("collaborator_name", "Collaborateur"),
    ("service", "Service"),
    ("folder_id", "ID Dossier"),
    ("folder_name", "Dossier"),
    ("folder_number", "N° Dossier"),
    ("duration", "Durée (h)"),
    ("description", "Description"),
    ("date", "Date"),
]


def _format_hours(value: float) -> str:
    # Spreadsheets in a French locale expect a decimal comma
    return f"{value:g}".replace(".", ",")


def entries_to_csv(entries: Iterable[TimeEntry], *, delimiter: str = ";") -> str:
    """Serialize entries as delimiter-separated text for spreadsheet import.

    The caller encodes with ``utf-8-sig`` so Excel detects UTF-8.
    """
    out = io.StringIO()
    writer = csv.writer(out, delimiter=delimiter, lineterminator="\r\n")
    writer.writerow([header for _, header in EXPORT_COLUMNS])
    for e in entries:
        row = []
        for attr, _ in EXPORT_COLUMNS:
            value = getattr(e, attr)
            row.append(_format_hours(value) if attr == "duration" else value)
        writer.writerow(row)
    return out.getvalue()


def entries_to_xlsx(entries: Iterable[TimeEntry]) -> bytes:
    df = pd.DataFrame(
        [[getattr(e, attr) for attr, _ in EXPORT_COLUMNS] for e in entries],
        columns=[header for _, header in EXPORT_COLUMNS],
    )
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Saisies")
    return out.getvalue()
