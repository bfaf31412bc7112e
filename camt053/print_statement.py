"""Print a readable summary of a CAMT.053 statement file."""

import sys
from pathlib import Path

from camt.cli import read_statement
from camt.errors import CamtError
from camt.models import Balance, BankStatement, Transaction


def format_balance(balance: Balance | None) -> str:
    if balance is None:
        return "N/A"
    return (
        f"{balance.amount.value} {balance.amount.currency} "
        f"({balance.credit_debit_indicator}) on {balance.date}"
    )


def describe_transaction(tx: Transaction) -> str:
    """
    One-line description of an entry.

    Uses the first transaction detail for the end-to-end id, counterparty and
    remittance reference.
    """
    parts = [
        f"{tx.booking_date}: {tx.amount.value:>12} {tx.amount.currency}",
        f"[{tx.credit_debit_indicator:4s}]",
        tx.status,
    ]
    if tx.reversal_indicator:
        parts.append("REVERSAL")

    if tx.details:
        detail = tx.details[0]
        if detail.references.end_to_end_id:
            parts.append(f"E2E: {detail.references.end_to_end_id}")
        if detail.related_parties:
            party, account = detail.related_parties.counterparty(tx.credit_debit_indicator)
            if party and party.name:
                parts.append(f"| {party.name}")
            if account and account.iban:
                parts.append(f"({account.iban})")
        if detail.remittance_information:
            structured = detail.remittance_information.structured
            reference = structured.creditor_reference_information.reference
            if reference:
                parts.append(f"Ref: {reference}")
            if structured.additional_remittance_information:
                parts.append(f"Info: {', '.join(structured.additional_remittance_information)}")
    return " ".join(part for part in parts if part)


def print_statement(statement: BankStatement) -> None:
    account = statement.account
    print(f"Statement ID: {statement.statement_id}")
    print(f"Period: {statement.from_date_time} to {statement.to_date_time}")
    print(f"Account: {account.iban} ({account.currency}) {account.name}")
    print(f"Owner: {account.owner.name}")
    if account.owner.address:
        print(f"Address: {', '.join(account.owner.address)}")
    print(f"Opening: {format_balance(statement.opening_balance)}")
    print(f"Closing: {format_balance(statement.closing_balance)}")

    if not statement.transactions:
        print("No transactions found.")
        return

    print(f"\nTransactions ({len(statement.transactions)}):")
    print("=" * 100)
    for i, tx in enumerate(statement.transactions, 1):
        print(f"{i:3d}. {describe_transaction(tx)}")
    print("=" * 100)


def main():
    if len(sys.argv) < 2:
        print("Usage: python print_statement.py <camt053_file_path>")
        sys.exit(1)

    xml_path = Path(sys.argv[1])
    if not xml_path.exists():
        print(f"ERROR: File not found: {xml_path}")
        sys.exit(1)

    try:
        document = read_statement(xml_path)
    except CamtError as e:
        print(f"ERROR: Could not parse {xml_path.name}: {e}")
        sys.exit(1)

    print(f"Message ID: {document.header.message_id}")
    print(f"Created: {document.header.creation_date_time}")
    if not document.statements:
        print("No statements in message.")
        return

    for i, statement in enumerate(document.statements, 1):
        print(f"\n=== Statement #{i} ===")
        print_statement(statement)


if __name__ == "__main__":
    main()
