"""Mapping of amount elements."""

from typing import Any, Optional

from .errors import MissingAmountError
from .models import Amount

from .nodes import child, text


def map_amount(amt: Any) -> Amount:
    """
    Map an amount element such as <Amt Ccy="EUR">1191.59</Amt>.

    An absent element gives the empty Amount(); an amount without a Ccy
    attribute keeps its value with an empty currency.
    """
    return Amount(currency=text(child(amt, "Ccy")), value=text(amt))


def map_amount_of(node: Any, strict: bool = False, path: Optional[str] = None) -> Amount:
    """
    Map the Amt child of a balance or entry.

    Raises:
        MissingAmountError: In strict mode, when Amt is absent or has no value
    """
    amt = child(node, "Amt")
    if strict and not text(amt):
        raise MissingAmountError("Amt element is missing or empty", path)
    return map_amount(amt)
