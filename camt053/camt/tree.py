"""lxml-based adapter producing the generic element tree."""

import logging
import re

from lxml import etree

from .errors import MalformedXmlError

logger = logging.getLogger(__name__)

CONTENT_KEY = "_"
"""Key holding the text of an element that also has attributes or children."""

_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")


class LxmlTreeAdapter:
    """Tree adapter backed by lxml.etree."""

    name = "lxml"

    def __init__(self):
        self._parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            remove_comments=True,
            remove_pis=True,
        )

    def parse(self, xml: str | bytes) -> dict:
        if isinstance(xml, str):
            # lxml refuses str input that still carries an encoding declaration
            xml = _XML_DECLARATION.sub("", xml.lstrip("\ufeff"), count=1)

        try:
            root = etree.fromstring(xml, self._parser)
        except etree.XMLSyntaxError as e:
            raise MalformedXmlError(f"XML parsing error: {e}") from e

        if root is None:
            raise MalformedXmlError("XML parsing error: document is empty")

        root_name = etree.QName(root).localname
        logger.debug("Parsed XML document with root element %s", root_name)
        return {root_name: self._convert(root)}

    def _convert(self, element) -> dict | str:
        attributes = {
            etree.QName(name).localname: value
            for name, value in element.attrib.items()
        }
        children = [child for child in element if isinstance(child.tag, str)]
        text = (element.text or "").strip()

        if not attributes and not children:
            return text

        node: dict = dict(attributes)
        for child in children:
            key = etree.QName(child).localname
            value = self._convert(child)
            if key not in node:
                node[key] = value
            elif isinstance(node[key], list):
                node[key].append(value)
            else:
                node[key] = [node[key], value]

        if text:
            node[CONTENT_KEY] = text
        return node


def xml_to_tree(xml: str | bytes) -> dict:
    """Parse message text with the default adapter."""
    return LxmlTreeAdapter().parse(xml)
