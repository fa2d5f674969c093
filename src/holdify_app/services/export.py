from __future__ import annotations

import csv
import io
from typing import List, Sequence, Tuple

from ..models.results import MonthlyResult

CSV_COLUMNS: List[Tuple[str, str]] = [
    ("month", "Month"),
    ("revenue_holding", "Holding Revenue"),
    ("charges_holding", "Holding Charges"),
    ("result_holding", "Holding Result"),
    ("revenue_subsidiary", "Subsidiary Revenue"),
    ("charges_subsidiary", "Subsidiary Charges"),
    ("result_subsidiary", "Subsidiary Result"),
    ("profit_holding", "Holding Profit"),
    ("is_amount", "Corporate Tax Paid"),
    ("profit_net", "Holding Net Profit"),
    ("dividend_on_profit", "Dividend on Profit"),
    ("shareholders_dividends", "Shareholder Dividends"),
    ("holding_to_subsidiary", "Holding to Subsidiary Transfer"),
    ("subsidiary_capital", "Subsidiary Capital"),
    ("holding_capital", "Holding Capital"),
]


def export_to_csv(results: Sequence[MonthlyResult]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([label for _, label in CSV_COLUMNS])
    for result in results:
        row = [str(result.month)]
        row.extend(f"{getattr(result, field):.2f}" for field, _ in CSV_COLUMNS[1:])
        writer.writerow(row)
    return buffer.getvalue().rstrip("\n")
