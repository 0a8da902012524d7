"""XML decoding and encoding of RSS 2.0 documents.

Decoding keeps the raw text of every element: absent elements and attributes
become None, empty ones become "". No conformance check happens here.
"""

from typing import Any, TypeVar, get_args, get_origin
from xml.dom import minidom
from xml.etree.ElementTree import Element, ParseError, SubElement, fromstring, tostring

from loguru import logger

from archor.exceptions import FeedDecodeError
from archor.models.rss import Document, RSSElement

T = TypeVar("T", bound=RSSElement)


def decode_feed(data: bytes | str) -> Document:
    """Decode an RSS 2.0 XML document.

    Args:
        data: UTF-8 XML bytes (or text) rooted at <rss>

    Returns:
        Document holding the decoded text of every known element

    Raises:
        FeedDecodeError: If the data is not well-formed XML or the root is not <rss>
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    try:
        root = fromstring(data)
    except ParseError as e:
        logger.error(f"Malformed feed XML: {e}")
        raise FeedDecodeError(f"Malformed XML: {e}") from e

    if root.tag != Document.xml_tag:
        raise FeedDecodeError(f"Root element is <{root.tag}>, expected <rss>", path=root.tag)

    document = _decode_element(root, Document)
    logger.debug(
        "Decoded feed",
        version=document.version,
        items=len(document.channel.items) if document.channel else 0,
    )
    return document


def encode_feed(document: Document) -> str:
    """Encode a Document as pretty-printed RSS 2.0 XML.

    Absent (None) fields are omitted.
    """
    rss = _encode_element(document)

    # Parse and pretty print
    dom = minidom.parseString(tostring(rss, encoding="unicode"))
    pretty_xml = dom.toprettyxml(indent="  ", encoding="utf-8").decode("utf-8")

    # Remove extra blank lines
    lines = [line for line in pretty_xml.split("\n") if line.strip()]
    return "\n".join(lines)


def _xml_name(model: type[RSSElement], name: str) -> str:
    field = model.model_fields[name]
    return field.alias or name


def _element_type(annotation: Any) -> type[RSSElement] | None:
    """The RSSElement type inside e.g. `Channel | None` or `list[Item]`."""
    for candidate in (annotation, *get_args(annotation)):
        if isinstance(candidate, type) and issubclass(candidate, RSSElement):
            return candidate
    return None


def _is_list(annotation: Any) -> bool:
    return get_origin(annotation) is list


def _text(node: Element) -> str:
    return (node.text or "").strip()


def _decode_element(node: Element, model: type[T]) -> T:
    values: dict[str, Any] = {}

    for name, field in model.model_fields.items():
        xml_name = _xml_name(model, name)
        nested = _element_type(field.annotation)

        if name in model.xml_attributes:
            values[name] = node.get(xml_name)
        elif name == "value":
            values[name] = _text(node)
        elif _is_list(field.annotation):
            children = node.findall(xml_name)
            if nested is not None:
                values[name] = [_decode_element(child, nested) for child in children]
            else:
                values[name] = [_text(child) for child in children]
        else:
            child = node.find(xml_name)
            if child is None:
                values[name] = None
            elif nested is not None:
                values[name] = _decode_element(child, nested)
            else:
                values[name] = _text(child)

    return model.model_validate(values)


def _encode_element(element: RSSElement, parent: Element | None = None) -> Element:
    model = type(element)
    node = Element(model.xml_tag) if parent is None else SubElement(parent, model.xml_tag)

    for name, field in model.model_fields.items():
        xml_name = _xml_name(model, name)
        value = getattr(element, name)
        if value is None:
            continue

        if name in model.xml_attributes:
            node.set(xml_name, value)
        elif name == "value":
            node.text = value
        elif _is_list(field.annotation):
            for entry in value:
                _encode_child(node, xml_name, entry)
        else:
            _encode_child(node, xml_name, value)

    return node


def _encode_child(node: Element, xml_name: str, value: RSSElement | str) -> None:
    if isinstance(value, RSSElement):
        _encode_element(value, node)
    else:
        SubElement(node, xml_name).text = value

