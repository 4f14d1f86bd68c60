"""
XML helpers.

Zillow answers every call with an XML document; ``parse_xml`` turns the raw
body into an lxml tree without resolving entities or touching the network,
and ``xml_to_dict`` flattens that tree into plain dicts, lists and strings.
"""

from typing import Any

from lxml import etree

from zillow.api.exceptions import XmlParseError

EMPTY_DOCUMENT = b"<root />"

ATTRIBUTES_KEY = "@attributes"
TEXT_KEY = "#text"


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        dtd_validation=False,
    )


def parse_xml(body: bytes | str | None, client: Any = None) -> etree._Element:
    """
    Parse a response body into an XML element tree.

    An empty body yields an empty ``<root />`` element.

    Args:
        body: Raw response body
        client: The client that received the body, attached to errors

    Raises:
        XmlParseError: The body is not well-formed XML
    """
    if isinstance(body, str):
        body = body.encode("utf-8")
    if not body:
        body = EMPTY_DOCUMENT

    parser = _make_parser()
    try:
        return etree.fromstring(body, parser)
    except etree.XMLSyntaxError as e:
        raise XmlParseError(
            f"Unable to parse response body into XML: {e}",
            client=client,
            exception=e,
            error=parser.error_log.last_error,
        ) from e


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _element_children(element: etree._Element) -> list[etree._Element]:
    # Skip comments and processing instructions
    return [child for child in element if isinstance(child.tag, str)]


def _convert(element: etree._Element) -> Any:
    if not element.attrib and not _element_children(element):
        return element.text or ""
    return xml_to_dict(element)


def xml_to_dict(element: etree._Element) -> dict[str, Any]:
    """
    Convert an element into a dict keyed by child element names.

    - leaf children without attributes become their text
    - repeated child names become lists, in document order
    - attributes go under ``@attributes``, non-blank text under ``#text``
    """
    result: dict[str, Any] = {}

    if element.attrib:
        result[ATTRIBUTES_KEY] = dict(element.attrib)

    for child in _element_children(element):
        key = _local_name(child)
        value = _convert(child)
        if key not in result:
            result[key] = value
        elif isinstance(result[key], list):
            result[key].append(value)
        else:
            result[key] = [result[key], value]

    text = (element.text or "").strip()
    if text:
        result[TEXT_KEY] = text

    return result
