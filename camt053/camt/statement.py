"""Mapping of the message document and its statements."""

from typing import Any, Optional

from .config import MappingConfig, get_config
from .errors import MissingAccountError, UnsupportedMessageError
from .models import BankStatement, BankStatementDocument, DocumentHeader

from .account import map_account
from .balance import map_balance, map_transaction_summary
from .entry import map_transaction
from .nodes import as_list, child, is_element, location, text, text_list

MESSAGE_ELEMENT = "BkToCstmrStmt"


def map_document(tree: dict, config: Optional[MappingConfig] = None) -> BankStatementDocument:
    """
    Map a parsed CAMT.053 element tree to a BankStatementDocument.

    Args:
        tree: Tree produced by a tree adapter, rooted at Document. A tree rooted
              at BkToCstmrStmt itself is accepted as well.
        config: Mapping configuration (default: get_config())

    Returns:
        BankStatementDocument object

    Raises:
        UnsupportedMessageError: If the tree holds no BkToCstmrStmt message
        MissingAccountError: If a statement has no account
        MappingError: Other mapping failures (strict mode)
    """
    config = config or get_config()

    message = child(tree, "Document", MESSAGE_ELEMENT)
    if message is None:
        message = child(tree, MESSAGE_ELEMENT)
    if message is None:
        root = ", ".join(tree) if isinstance(tree, dict) else type(tree).__name__
        raise UnsupportedMessageError(
            f"Not a bank-to-customer statement message (root: {root or 'empty'})"
        )

    return BankStatementDocument(
        header=map_header(child(message, "GrpHdr")),
        statements=[
            map_statement(stmt, strict=config.strict, path=f"Stmt[{i}]")
            for i, stmt in enumerate(as_list(child(message, "Stmt")))
        ],
    )


def map_header(grp_hdr: Any) -> DocumentHeader:
    """Map GrpHdr. The header is advisory, so missing fields become ''."""
    return DocumentHeader(
        message_id=text(child(grp_hdr, "MsgId")),
        creation_date_time=text(child(grp_hdr, "CreDtTm")),
    )


def map_statement(stmt: Any, strict: bool = False, path: Optional[str] = None) -> BankStatement:
    """
    Map a Stmt element.

    Descriptive fields default to ''. The account is required: a statement
    that cannot be tied to an account is of no use to any consumer.

    Args:
        stmt: Stmt element
        strict: Strict mapping of balances and entries
        path: Location of the element, used in error messages

    Returns:
        BankStatement object

    Raises:
        MissingAccountError: If the statement has no Acct element
    """
    statement_id = text(child(stmt, "Id"))
    acct = child(stmt, "Acct")
    if not is_element(acct):
        raise MissingAccountError(
            f"Statement '{statement_id}' has no account information", path
        )

    txs_summry = child(stmt, "TxsSummry")
    return BankStatement(
        statement_id=statement_id,
        sequence_number=text(child(stmt, "LglSeqNb")),
        creation_date_time=text(child(stmt, "CreDtTm")),
        from_date_time=text(child(stmt, "FrToDt", "FrDtTm")),
        to_date_time=text(child(stmt, "FrToDt", "ToDtTm")),
        reporting_source=text(child(stmt, "RptgSrc", "Prtry")),
        account=map_account(acct),
        balances=[
            map_balance(bal, strict=strict, path=location(path, f"Bal[{i}]"))
            for i, bal in enumerate(as_list(child(stmt, "Bal")))
        ],
        transaction_summary=(
            map_transaction_summary(txs_summry) if txs_summry is not None else None
        ),
        transactions=[
            map_transaction(ntry, strict=strict, path=location(path, f"Ntry[{i}]"))
            for i, ntry in enumerate(as_list(child(stmt, "Ntry")))
        ],
        additional_info="\n".join(text_list(child(stmt, "AddtlStmtInf"))),
    )
