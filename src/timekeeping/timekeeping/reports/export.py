from __future__ import annotations

import csv
import io
from typing import Sequence

import pandas as pd

from .model import ReportRow

REPORT_COLUMNS = [
    "calendar_date",
    "employee_id",
    "employee_name",
    "worked",
    "paused",
    "tracked",
    "details",
]

SHEET_NAME = "Report"


def report_to_csv(rows: Sequence[ReportRow]) -> bytes:
    """CSV bytes with a BOM so spreadsheet apps detect UTF-8 names."""

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=REPORT_COLUMNS, extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow(row.to_dict())
    return out.getvalue().encode("utf-8-sig")


def report_to_frame(rows: Sequence[ReportRow]) -> pd.DataFrame:
    return pd.DataFrame([row.to_dict() for row in rows], columns=REPORT_COLUMNS)


def report_to_xlsx(rows: Sequence[ReportRow]) -> io.BytesIO:
    df = report_to_frame(rows)

    # Written in memory, never to disk.
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
    output.seek(0)
    return output
