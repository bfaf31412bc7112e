"""Entry point: message text in, BankStatementDocument out."""

import logging
from typing import Optional

from .config import MappingConfig
from .models import BankStatementDocument

from .base import TreeAdapter
from .statement import map_document
from .tree import LxmlTreeAdapter

logger = logging.getLogger(__name__)


def parse_camt053(
    xml: str | bytes,
    config: Optional[MappingConfig] = None,
    adapter: Optional[TreeAdapter] = None,
) -> BankStatementDocument:
    """
    Parse a CAMT.053 message.

    Args:
        xml: Full message content
        config: Mapping configuration (default: get_config())
        adapter: Tree adapter (default: LxmlTreeAdapter)

    Returns:
        BankStatementDocument object

    Raises:
        MalformedXmlError: If the text is not well-formed XML
        UnsupportedMessageError: If the message is not a BkToCstmrStmt
        MappingError: If the tree cannot be mapped (see map_document)
    """
    adapter = adapter or LxmlTreeAdapter()
    tree = adapter.parse(xml)
    document = map_document(tree, config)

    logger.debug(
        "Mapped %d statement(s) from message '%s' using %s adapter",
        len(document.statements),
        document.header.message_id,
        adapter.name,
    )
    return document
