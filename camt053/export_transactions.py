"""Export statement transactions to a flat table (one row per transaction detail).

Columns:
- Statement ID, IBAN, Booking Date, Value Date, Status
- Credit/Debit, Amount, Currency, Reversal
- Entry Reference, Servicer Reference, End-to-End ID
- Counterparty, Counterparty IBAN, Remittance Reference, Remittance Info

Amounts stay decimal strings so the CSV holds exactly what the bank sent.
"""

import logging
import sys
from pathlib import Path

import pandas as pd

from camt.cli import read_statement
from camt.errors import CamtError
from camt.models import BankStatementDocument, Transaction, TransactionDetail

logger = logging.getLogger(__name__)

COLUMN_STATEMENT_ID = "Statement ID"
COLUMN_IBAN = "IBAN"
COLUMN_BOOKING_DATE = "Booking Date"
COLUMN_VALUE_DATE = "Value Date"
COLUMN_STATUS = "Status"
COLUMN_CREDIT_DEBIT = "Credit/Debit"
COLUMN_AMOUNT = "Amount"
COLUMN_CURRENCY = "Currency"
COLUMN_REVERSAL = "Reversal"
COLUMN_ENTRY_REFERENCE = "Entry Reference"
COLUMN_SERVICER_REFERENCE = "Servicer Reference"
COLUMN_END_TO_END_ID = "End-to-End ID"
COLUMN_COUNTERPARTY = "Counterparty"
COLUMN_COUNTERPARTY_IBAN = "Counterparty IBAN"
COLUMN_REMITTANCE_REFERENCE = "Remittance Reference"
COLUMN_REMITTANCE_INFO = "Remittance Info"

COLUMNS = [
    COLUMN_STATEMENT_ID,
    COLUMN_IBAN,
    COLUMN_BOOKING_DATE,
    COLUMN_VALUE_DATE,
    COLUMN_STATUS,
    COLUMN_CREDIT_DEBIT,
    COLUMN_AMOUNT,
    COLUMN_CURRENCY,
    COLUMN_REVERSAL,
    COLUMN_ENTRY_REFERENCE,
    COLUMN_SERVICER_REFERENCE,
    COLUMN_END_TO_END_ID,
    COLUMN_COUNTERPARTY,
    COLUMN_COUNTERPARTY_IBAN,
    COLUMN_REMITTANCE_REFERENCE,
    COLUMN_REMITTANCE_INFO,
]


def transactions_frame(document: BankStatementDocument) -> pd.DataFrame:
    """
    Build a DataFrame with one row per transaction detail.

    An entry without details still gives one row, taking its amount and
    references from the entry itself. All columns hold strings.

    Args:
        document: Parsed statement document

    Returns:
        DataFrame with COLUMNS as columns, in statement and entry order
    """
    rows = []
    for statement in document.statements:
        for tx in statement.transactions:
            for detail in tx.details or [None]:
                row = _row(tx, detail)
                row[COLUMN_STATEMENT_ID] = statement.statement_id
                row[COLUMN_IBAN] = statement.account.iban
                rows.append(row)

    logger.info(
        "Built %d transaction rows from %d statement(s)",
        len(rows),
        len(document.statements),
    )
    return pd.DataFrame(rows, columns=COLUMNS, dtype="object")


def _row(tx: Transaction, detail: TransactionDetail | None) -> dict[str, str]:
    row = {
        COLUMN_BOOKING_DATE: tx.booking_date,
        COLUMN_VALUE_DATE: tx.value_date,
        COLUMN_STATUS: tx.status,
        COLUMN_CREDIT_DEBIT: tx.credit_debit_indicator,
        COLUMN_AMOUNT: tx.amount.value,
        COLUMN_CURRENCY: tx.amount.currency,
        COLUMN_REVERSAL: str(tx.reversal_indicator).lower(),
        COLUMN_ENTRY_REFERENCE: tx.reference or "",
        COLUMN_SERVICER_REFERENCE: tx.account_servicer_reference,
        COLUMN_END_TO_END_ID: "",
        COLUMN_COUNTERPARTY: "",
        COLUMN_COUNTERPARTY_IBAN: "",
        COLUMN_REMITTANCE_REFERENCE: "",
        COLUMN_REMITTANCE_INFO: "",
    }
    if detail is None:
        return row

    # Batched entries carry one amount per detail
    amount = detail.amount_details.transaction_amount
    if amount.value:
        row[COLUMN_AMOUNT] = amount.value
        row[COLUMN_CURRENCY] = amount.currency

    if detail.references.account_servicer_reference:
        row[COLUMN_SERVICER_REFERENCE] = detail.references.account_servicer_reference
    row[COLUMN_END_TO_END_ID] = detail.references.end_to_end_id

    if detail.related_parties:
        party, account = detail.related_parties.counterparty(tx.credit_debit_indicator)
        row[COLUMN_COUNTERPARTY] = party.name if party else ""
        row[COLUMN_COUNTERPARTY_IBAN] = account.iban if account else ""

    if detail.remittance_information:
        structured = detail.remittance_information.structured
        row[COLUMN_REMITTANCE_REFERENCE] = structured.creditor_reference_information.reference
        row[COLUMN_REMITTANCE_INFO] = " ".join(structured.additional_remittance_information)

    return row


def write_csv(document: BankStatementDocument, output_path: Path) -> int:
    """
    Write the transaction table to a CSV file.

    Returns:
        Number of rows written
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    frame = transactions_frame(document)
    frame.to_csv(output_path, index=False, encoding="utf-8")
    return len(frame)


def main():
    if len(sys.argv) < 2:
        print("Usage: python export_transactions.py <camt053_file_path> [output_csv]")
        print("\nArguments:")
        print("  camt053_file_path  CAMT.053 XML statement")
        print("  output_csv         Output file (default: <input>.csv)")
        sys.exit(1)

    xml_path = Path(sys.argv[1])
    if not xml_path.exists():
        print(f"ERROR: File not found: {xml_path}")
        sys.exit(1)

    output_path = Path(sys.argv[2]) if len(sys.argv) > 2 else xml_path.with_suffix(".csv")

    try:
        document = read_statement(xml_path)
    except CamtError as e:
        print(f"ERROR: Could not parse {xml_path.name}: {e}")
        sys.exit(1)

    count = write_csv(document, output_path)
    print(f"Exported {count} transaction rows to: {output_path}")


if __name__ == "__main__":
    main()
