"""Namespaces and schema locations for the oai_dc metadata format."""

from xml.etree import ElementTree as ET

METADATA_PREFIX = "oai_dc"
OAI_NS = "http://www.openarchives.org/OAI/2.0/"
OAI_DC_NS = "http://www.openarchives.org/OAI/2.0/oai_dc/"
OAI_DC_SCHEMA = "http://www.openarchives.org/OAI/2.0/oai_dc.xsd"
DC_NS = "http://purl.org/dc/elements/1.1/"
DCTERMS_NS = "http://purl.org/dc/terms/"

ET.register_namespace("", OAI_NS)
ET.register_namespace("oai_dc", OAI_DC_NS)
ET.register_namespace("dc", DC_NS)
ET.register_namespace("dcterms", DCTERMS_NS)

ELEMENT_NAMESPACES = {
    "oai_dc": OAI_DC_NS,
    "dc": DC_NS,
    "dcterms": DCTERMS_NS,
}
