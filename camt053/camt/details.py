"""Mapping of transaction details (TxDtls) and their parties and remittance."""

from typing import Any, Optional

from .errors import InvalidTransactionDetailError
from .models import (
    AccountIdentification,
    AmountDetails,
    CreditorReferenceInformation,
    Party,
    PostalAddress,
    RelatedParties,
    RemittanceInformation,
    StructuredRemittanceInformation,
    TransactionDetail,
    TransactionReferences,
)

from .amount import map_amount
from .nodes import child, is_element, text, text_list


def map_transaction_detail(
    tx_dtls: Any, strict: bool = False, path: Optional[str] = None
) -> TransactionDetail:
    """
    Map a TxDtls element.

    References and amount are leaf descriptive fields and default to empty
    values. Related parties and remittance information are only present when
    the source carries them.

    Raises:
        InvalidTransactionDetailError: In strict mode, when the element is empty
    """
    if not is_element(tx_dtls):
        if strict:
            raise InvalidTransactionDetailError("Transaction detail element is empty", path)
        return TransactionDetail()

    rltd_pties = child(tx_dtls, "RltdPties")
    strd = child(tx_dtls, "RmtInf", "Strd")
    return TransactionDetail(
        references=TransactionReferences(
            account_servicer_reference=text(child(tx_dtls, "Refs", "AcctSvcrRef")),
            end_to_end_id=text(child(tx_dtls, "Refs", "EndToEndId")),
        ),
        amount_details=AmountDetails(
            transaction_amount=map_amount(child(tx_dtls, "AmtDtls", "TxAmt", "Amt")),
        ),
        related_parties=map_related_parties(rltd_pties) if rltd_pties is not None else None,
        remittance_information=(
            map_remittance_information(strd) if strd is not None else None
        ),
    )


def map_related_parties(rltd_pties: Any) -> RelatedParties:
    """Map RltdPties. Debtor, creditor and their accounts are each optional."""
    dbtr = child(rltd_pties, "Dbtr")
    dbtr_acct = child(rltd_pties, "DbtrAcct")
    cdtr = child(rltd_pties, "Cdtr")
    cdtr_acct = child(rltd_pties, "CdtrAcct")
    return RelatedParties(
        debtor=map_party(dbtr) if dbtr is not None else None,
        debtor_account=map_account_identification(dbtr_acct) if dbtr_acct is not None else None,
        creditor=map_party(cdtr) if cdtr is not None else None,
        creditor_account=map_account_identification(cdtr_acct) if cdtr_acct is not None else None,
    )


def map_party(party: Any) -> Party:
    """
    Map a Dbtr or Cdtr element.

    Newer schema versions wrap the party in Pty; older ones (camt.053.001.02)
    put Nm and PstlAdr directly on the element.
    """
    pty = child(party, "Pty")
    if pty is None:
        pty = party

    country = child(pty, "PstlAdr", "Ctry")
    return Party(
        name=text(child(pty, "Nm")),
        postal_address=PostalAddress(
            country=text(country) if country is not None else None,
            address_line=text_list(child(pty, "PstlAdr", "AdrLine")),
        ),
    )


def map_account_identification(acct: Any) -> AccountIdentification:
    return AccountIdentification(iban=text(child(acct, "Id", "IBAN")))


def map_remittance_information(strd: Any) -> RemittanceInformation:
    """Map the structured remittance block (RmtInf/Strd)."""
    cdtr_ref_inf = child(strd, "CdtrRefInf")
    return RemittanceInformation(
        structured=StructuredRemittanceInformation(
            creditor_reference_information=CreditorReferenceInformation(
                type=text(child(cdtr_ref_inf, "Tp", "CdOrPrtry", "Cd")),
                reference=text(child(cdtr_ref_inf, "Ref")),
            ),
            additional_remittance_information=text_list(child(strd, "AddtlRmtInf")),
        )
    )
