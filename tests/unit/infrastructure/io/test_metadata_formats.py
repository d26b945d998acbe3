"""Tests for the metadata format registry."""

import pytest

from oaipmh_repository.infrastructure.io import (
    MetadataFormatNotFoundError,
    OaiDcMetadataFormat,
    describe_metadata_format,
    get_metadata_format,
    list_metadata_formats,
)


class TestMetadataFormatRegistry:
    def test_oai_dc_is_registered(self):
        assert "oai_dc" in list(list_metadata_formats())

    def test_get_metadata_format(self, resolve_url):
        metadata_format = get_metadata_format("oai_dc", resolve_url=resolve_url)

        assert isinstance(metadata_format, OaiDcMetadataFormat)
        assert metadata_format.metadata_prefix == "oai_dc"

    def test_unknown_prefix(self, resolve_url):
        with pytest.raises(MetadataFormatNotFoundError, match="mods"):
            get_metadata_format("mods", resolve_url=resolve_url)

    def test_unknown_prefix_message_is_not_quoted(self, resolve_url):
        with pytest.raises(MetadataFormatNotFoundError) as info:
            get_metadata_format("mods", resolve_url=resolve_url)

        assert str(info.value) == "Unknown metadata prefix 'mods'"
        assert info.value.prefix == "mods"

    def test_unknown_prefix_is_a_key_error(self):
        with pytest.raises(KeyError):
            describe_metadata_format("mods")

    def test_describe(self):
        namespace, schema = describe_metadata_format("oai_dc")

        assert namespace == "http://www.openarchives.org/OAI/2.0/oai_dc/"
        assert schema == "http://www.openarchives.org/OAI/2.0/oai_dc.xsd"
