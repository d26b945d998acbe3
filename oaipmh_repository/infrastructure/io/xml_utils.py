from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias
from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element

if TYPE_CHECKING:
    XmlElement: TypeAlias = Element[str]
else:
    XmlElement: TypeAlias = Element

XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
ET.register_namespace("xsi", XSI_NS)


def tag(namespace: str, name: str) -> str:
    return f"{{{namespace}}}{name}"


def attr(namespace: str, name: str) -> str:
    return f"{{{namespace}}}{name}"


def declare_schema_location(element: XmlElement, namespace: str, schema: str) -> None:
    element.set(attr(XSI_NS, "schemaLocation"), f"{namespace} {schema}")


def append_new_element(
    parent: XmlElement, namespace: str, local_name: str, text: str
) -> XmlElement:
    child = ET.SubElement(parent, tag(namespace, local_name))
    child.text = text
    return child
