"""Mapping of the statement account and its owner."""

from typing import Any

from .models import AccountOwner, BankAccount

from .nodes import as_list, child, text, text_list


def map_account(acct: Any) -> BankAccount:
    """Map an Acct element. Presence is checked by the statement mapper."""
    return BankAccount(
        iban=text(child(acct, "Id", "IBAN")),
        currency=text(child(acct, "Ccy")),
        name=text(child(acct, "Nm")),
        owner=map_owner(child(acct, "Ownr")),
    )


def map_owner(ownr: Any) -> AccountOwner:
    """
    Map an Ownr element.

    Owner data is often blank for omnibus and clearing accounts, so an absent
    owner maps to an empty AccountOwner instead of failing.
    """
    if ownr is None:
        return AccountOwner()

    return AccountOwner(
        name=text(child(ownr, "Nm")),
        address=text_list(child(ownr, "PstlAdr", "AdrLine")),
        id=_owner_id(child(ownr, "Id")),
    )


def _owner_id(owner_id: Any) -> str:
    # Organisation id first, private id for individuals
    for kind in ("OrgId", "PrvtId"):
        for other in as_list(child(owner_id, kind, "Othr")):
            value = text(child(other, "Id"))
            if value:
                return value
    return ""
