"""Spreadsheet export of an amortization schedule."""
from __future__ import annotations

import io

import pandas as pd

from loandocs.models.schedule import AmortizationSchedule

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def schedule_to_frame(schedule: AmortizationSchedule) -> pd.DataFrame:
    df = pd.DataFrame([row.model_dump() for row in schedule.rows])
    df["month"] = ["Balloon" if b else m for m, b in zip(df["month"], df["is_balloon"])]
    df = df.drop(columns=["is_balloon"])
    return df.rename(columns={
        "month": "#",
        "payment_date": "Payment Date",
        "payment": "Payment",
        "principal": "Principal",
        "interest": "Interest",
        "balance": "Balance",
    }).round({"Payment": 2, "Principal": 2, "Interest": 2, "Balance": 2})


def schedule_to_xlsx(schedule: AmortizationSchedule) -> bytes:
    """Two sheets: the payment rows and a totals summary."""
    summary = pd.DataFrame([
        ("Total Interest", round(schedule.total_interest, 2)),
        ("Total Principal", round(schedule.total_principal, 2)),
        ("Total of Payments", round(schedule.total_payments, 2)),
        ("Balloon Payment", round(schedule.balloon_amount, 2)),
        ("First Payment Date", schedule.first_payment_date),
        ("Maturity Date", schedule.maturity_date),
    ], columns=["Item", "Value"])

    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        schedule_to_frame(schedule).to_excel(writer, index=False, sheet_name="Schedule")
        summary.to_excel(writer, index=False, sheet_name="Summary")
    return buf.getvalue()
