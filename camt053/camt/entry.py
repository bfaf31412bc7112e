"""Mapping of statement entries (Ntry)."""

from typing import Any, Optional

from .errors import InvalidTransactionError
from .models import Transaction, TransactionDetail

from .amount import map_amount_of
from .details import map_transaction_detail
from .nodes import as_list, child, is_element, location, pick_date, text


def map_transaction(
    ntry: Any, strict: bool = False, path: Optional[str] = None
) -> Transaction:
    """
    Map an Ntry element to a Transaction.

    Args:
        ntry: Ntry element
        strict: Fail on a missing amount or an empty transaction detail
        path: Location of the element, used in error messages

    Returns:
        Transaction object

    Raises:
        InvalidTransactionError: If the element is absent or empty
    """
    if not is_element(ntry):
        raise InvalidTransactionError("Entry element is absent or empty", path)

    reference = child(ntry, "NtryRef")
    return Transaction(
        reference=text(reference) if reference is not None else None,
        amount=map_amount_of(ntry, strict=strict, path=path),
        credit_debit_indicator=text(child(ntry, "CdtDbtInd")),
        # Only the literal "true" counts; anything else must not stop ingestion
        reversal_indicator=text(child(ntry, "RvslInd")) == "true",
        status=_status(child(ntry, "Sts")),
        booking_date=pick_date(child(ntry, "BookgDt")),
        value_date=pick_date(child(ntry, "ValDt")),
        account_servicer_reference=text(child(ntry, "AcctSvcrRef")),
        bank_transaction_code=_bank_transaction_code(child(ntry, "BkTxCd")),
        details=map_entry_details(child(ntry, "NtryDtls"), strict=strict, path=path),
        additional_info=text(child(ntry, "AddtlNtryInf")),
    )


def map_entry_details(
    ntry_dtls: Any, strict: bool = False, path: Optional[str] = None
) -> list[TransactionDetail]:
    """
    Flatten NtryDtls/TxDtls into one ordered list of transaction details.

    An entry may carry several NtryDtls containers (batches), each with several
    TxDtls records; either level may arrive as a single element or a list.
    """
    details = []
    for i, container in enumerate(as_list(ntry_dtls)):
        for j, tx_dtls in enumerate(as_list(child(container, "TxDtls"))):
            details.append(
                map_transaction_detail(
                    tx_dtls,
                    strict=strict,
                    path=location(path, f"NtryDtls[{i}]", f"TxDtls[{j}]"),
                )
            )
    return details


def _status(sts: Any) -> str:
    # camt.053.001.02 sends <Sts>BOOK</Sts>, later versions <Sts><Cd>BOOK</Cd></Sts>
    return text(child(sts, "Cd")) or text(sts)


def _bank_transaction_code(bk_tx_cd: Any) -> str:
    proprietary = text(child(bk_tx_cd, "Prtry", "Cd"))
    if proprietary:
        return proprietary

    domain = child(bk_tx_cd, "Domn")
    parts = [
        text(child(domain, "Cd")),
        text(child(domain, "Fmly", "Cd")),
        text(child(domain, "Fmly", "SubFmlyCd")),
    ]
    return "/".join(part for part in parts if part)
