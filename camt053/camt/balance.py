"""Mapping of balances and the transaction summary."""

from typing import Any, Optional

from .errors import InvalidBalanceError
from .models import Balance, SummaryDetail, TransactionSummary

from .amount import map_amount_of
from .nodes import child, is_element, pick_date, text


def map_balance(bal: Any, strict: bool = False, path: Optional[str] = None) -> Balance:
    """
    Map a Bal element.

    The type code sits two optional levels down (Tp/CdOrPrtry/Cd); any missing
    level gives an empty type so that the amount is still ingested. Banks that
    use proprietary balance types send Tp/CdOrPrtry/Prtry instead.

    Args:
        bal: Bal element
        strict: Fail on an empty balance or a missing amount
        path: Location of the element, used in error messages

    Returns:
        Balance object

    Raises:
        InvalidBalanceError: In strict mode, when the element is empty
        MissingAmountError: In strict mode, when Amt is missing
    """
    if strict and not is_element(bal):
        raise InvalidBalanceError("Balance element is empty", path)

    code_or_proprietary = child(bal, "Tp", "CdOrPrtry")
    return Balance(
        type=text(child(code_or_proprietary, "Cd"))
        or text(child(code_or_proprietary, "Prtry")),
        amount=map_amount_of(bal, strict=strict, path=path),
        credit_debit_indicator=text(child(bal, "CdtDbtInd")),
        date=pick_date(child(bal, "Dt")),
    )


def map_transaction_summary(txs_summry: Any) -> TransactionSummary:
    """
    Map a TxsSummry element.

    Each total block is optional on its own. A block the bank did not send
    stays None, which keeps "no credits reported" apart from "zero credits".
    """
    return TransactionSummary(
        total_entries=_map_summary_detail(child(txs_summry, "TtlNtries")),
        total_credit_entries=_map_summary_detail(child(txs_summry, "TtlCdtNtries")),
        total_debit_entries=_map_summary_detail(child(txs_summry, "TtlDbtNtries")),
    )


def _map_summary_detail(block: Any) -> Optional[SummaryDetail]:
    if block is None:
        return None
    return SummaryDetail(
        number_of_entries=text(child(block, "NbOfNtries")),
        sum=text(child(block, "Sum")),
    )
