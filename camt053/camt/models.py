"""Pydantic models for CAMT.053 bank statement documents."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

OPENING_BOOKED = "OPBD"
CLOSING_BOOKED = "CLBD"
CREDIT = "CRDT"
DEBIT = "DBIT"


class CamtModel(BaseModel):
    """Base for all statement models: immutable, camelCase when serialized."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Amount(CamtModel):
    """A monetary amount.

    The value is kept as the decimal string found in the message so that
    no precision is lost. ``Amount()`` is the empty amount.
    """

    currency: str = ""
    """ISO 4217 currency code (e.g., 'EUR')."""
    value: str = ""
    """Decimal string (e.g., '1191.59')."""


class DocumentHeader(CamtModel):
    """Group header of the message."""

    message_id: str = ""
    creation_date_time: str = ""


class AccountOwner(CamtModel):
    """Owner of the reported account."""

    name: str = ""
    address: list[str] = Field(default_factory=list)
    id: str = ""
    """Organisation (or private) identifier, empty when not reported."""


class BankAccount(CamtModel):
    """The account a statement reports on."""

    iban: str = ""
    currency: str = ""
    name: str = ""
    owner: AccountOwner = Field(default_factory=AccountOwner)


class Balance(CamtModel):
    """A reported balance (opening, closing, ...)."""

    type: str = ""
    """Balance type code, e.g. 'OPBD' or 'CLBD'. Proprietary codes pass through."""
    amount: Amount = Field(default_factory=Amount)
    credit_debit_indicator: str = ""
    """Either 'CRDT' or 'DBIT'."""
    date: str = ""
    """ISO 8601 date or date-time."""


class SummaryDetail(CamtModel):
    """Count and sum of a group of entries."""

    number_of_entries: str = ""
    sum: str = ""


class TransactionSummary(CamtModel):
    """Totals reported for the statement.

    A block that the bank did not report stays ``None``; this is different
    from a block reported with a zero sum.
    """

    total_entries: Optional[SummaryDetail] = None
    total_credit_entries: Optional[SummaryDetail] = None
    total_debit_entries: Optional[SummaryDetail] = None


class TransactionReferences(CamtModel):
    account_servicer_reference: str = ""
    end_to_end_id: str = ""


class AmountDetails(CamtModel):
    transaction_amount: Amount = Field(default_factory=Amount)


class PostalAddress(CamtModel):
    country: Optional[str] = None
    address_line: list[str] = Field(default_factory=list)


class Party(CamtModel):
    """A debtor or creditor."""

    name: str = ""
    postal_address: PostalAddress = Field(default_factory=PostalAddress)


class AccountIdentification(CamtModel):
    iban: str = ""


class RelatedParties(CamtModel):
    """Parties of a transaction. Each side is reported independently."""

    debtor: Optional[Party] = None
    debtor_account: Optional[AccountIdentification] = None
    creditor: Optional[Party] = None
    creditor_account: Optional[AccountIdentification] = None

    def counterparty(
        self, credit_debit_indicator: str
    ) -> tuple[Optional[Party], Optional[AccountIdentification]]:
        """
        Return the party on the other side of the movement.

        Money leaving the account (DBIT) goes to the creditor; money coming
        in (CRDT) comes from the debtor.

        Args:
            credit_debit_indicator: Indicator of the owning entry

        Returns:
            Tuple of (party, account), either of which may be None
        """
        if credit_debit_indicator == DEBIT:
            return self.creditor, self.creditor_account
        if credit_debit_indicator == CREDIT:
            return self.debtor, self.debtor_account
        return None, None


class CreditorReferenceInformation(CamtModel):
    type: str = ""
    reference: str = ""


class StructuredRemittanceInformation(CamtModel):
    creditor_reference_information: CreditorReferenceInformation = Field(
        default_factory=CreditorReferenceInformation
    )
    additional_remittance_information: list[str] = Field(default_factory=list)


class RemittanceInformation(CamtModel):
    """Structured remittance block. Unstructured text is not carried."""

    structured: StructuredRemittanceInformation = Field(
        default_factory=StructuredRemittanceInformation
    )


class TransactionDetail(CamtModel):
    """One underlying transaction of an entry."""

    references: TransactionReferences = Field(default_factory=TransactionReferences)
    amount_details: AmountDetails = Field(default_factory=AmountDetails)
    related_parties: Optional[RelatedParties] = None
    remittance_information: Optional[RemittanceInformation] = None


class Transaction(CamtModel):
    """A single statement entry."""

    # Mandatory fields
    amount: Amount = Field(default_factory=Amount)
    credit_debit_indicator: str = ""
    """Either 'CRDT' or 'DBIT'."""
    reversal_indicator: bool = False
    status: str = ""
    """Entry status, e.g. 'BOOK'."""
    booking_date: str = ""
    value_date: str = ""
    account_servicer_reference: str = ""
    bank_transaction_code: str = ""
    details: list[TransactionDetail] = Field(default_factory=list)

    # Optional fields
    reference: Optional[str] = None
    """Entry reference (NtryRef), None when the bank does not send one."""
    additional_info: str = ""


class BankStatement(CamtModel):
    """A single account statement within a message."""

    statement_id: str = ""
    sequence_number: str = ""
    creation_date_time: str = ""
    from_date_time: str = ""
    to_date_time: str = ""
    reporting_source: str = ""
    account: BankAccount
    balances: list[Balance] = Field(default_factory=list)
    transaction_summary: Optional[TransactionSummary] = None
    transactions: list[Transaction] = Field(default_factory=list)
    additional_info: str = ""

    @property
    def opening_balance(self) -> Optional[Balance]:
        return self._first_balance(OPENING_BOOKED)

    @property
    def closing_balance(self) -> Optional[Balance]:
        return self._first_balance(CLOSING_BOOKED)

    def _first_balance(self, balance_type: str) -> Optional[Balance]:
        return next((b for b in self.balances if b.type == balance_type), None)


class BankStatementDocument(CamtModel):
    """A parsed CAMT.053 message."""

    header: DocumentHeader = Field(default_factory=DocumentHeader)
    statements: list[BankStatement] = Field(default_factory=list)

    def to_dict(self) -> dict:
        """Plain dict with camelCase keys; unreported optional blocks are left out."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
