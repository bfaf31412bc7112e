"""Exceptions raised while reading CAMT.053 messages."""

from typing import Optional


class CamtError(Exception):
    """Base class for all CAMT reading errors."""


class MalformedXmlError(CamtError, ValueError):
    """The message text is not well-formed XML."""


class UnsupportedMessageError(CamtError):
    """The message is not a bank-to-customer statement (BkToCstmrStmt)."""


class MappingError(CamtError):
    """
    A parsed element tree could not be mapped to the statement model.

    Attributes:
        path: Location of the offending element, e.g. 'Stmt[0]/Ntry[2]'
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)


class MissingAccountError(MappingError):
    """A statement has no Acct element."""


class InvalidTransactionError(MappingError):
    """An entry (Ntry) element is absent or empty."""


class InvalidBalanceError(MappingError):
    """A balance (Bal) element is empty. Raised in strict mode only."""


class MissingAmountError(MappingError):
    """A balance or entry carries no Amt element. Raised in strict mode only."""


class InvalidTransactionDetailError(MappingError):
    """A transaction detail (TxDtls) element is empty. Raised in strict mode only."""
