"""
Unit tests for signable payload resolution.
"""

import json

import pytest

from accessgrid.payload import (
    EMPTY_PAYLOAD,
    extract_resource_id,
    resolve_payload,
    serialize,
    sig_payload_param
)


class TestExtractResourceId:
    """Test resource id derivation from paths."""

    @pytest.mark.parametrize("action", ["suspend", "resume", "unlink", "delete"])
    def test_action_suffix(self, action):
        """Test action paths resolve to the preceding segment."""
        assert extract_resource_id(f"/v1/key-cards/0xc4rd1d/{action}") == "0xc4rd1d"

    def test_last_segment(self):
        """Test plain paths resolve to the last segment."""
        assert extract_resource_id("/v1/console/card-templates/0xd3adb00b5") == "0xd3adb00b5"

    def test_non_action_suffix(self):
        """Test non-action suffixes are taken as the resource id."""
        assert extract_resource_id("/v1/console/card-templates/0xd3adb00b5/logs") == "logs"

    def test_collection_path(self):
        """Test collection paths resolve to the collection segment."""
        assert extract_resource_id("/v1/key-cards") == "key-cards"

    def test_empty_segments_discarded(self):
        """Test repeated and trailing slashes are ignored."""
        assert extract_resource_id("//v1//key-cards//abc//") == "abc"

    def test_query_string_ignored(self):
        """Test query strings are not part of the last segment."""
        assert extract_resource_id("/v1/key-cards?template_id=0xtemplate") == "key-cards"

    @pytest.mark.parametrize("path", ["", "/", "/v1", "/suspend", "v1/"])
    def test_short_paths(self, path):
        """Test paths with fewer than two segments yield no id."""
        assert extract_resource_id(path) is None

    def test_action_with_two_segments(self):
        """Test an action after a single segment uses that segment."""
        assert extract_resource_id("/v1/suspend") == "v1"


class TestResolvePayload:
    """Test payload resolution rules."""

    def test_body_is_sent_and_signed(self):
        """Test non-empty bodies are both sent and signed."""
        body = {"card_template_id": "0xd3adb00b5", "full_name": "Employee name"}
        resolved = resolve_payload("POST", "/v1/key-cards", body)

        assert resolved.payload_to_send == resolved.payload_to_sign
        assert resolved.payload_to_sign == '{"card_template_id":"0xd3adb00b5","full_name":"Employee name"}'
        assert resolved.resource_id is None

    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH"])
    def test_body_round_trip(self, method):
        """Test parsing the signed payload yields the original body."""
        body = {"name": "Employee NFC key", "watch_count": 2, "allow_on_multiple_devices": True,
                "nested": {"label": "Zoë"}}
        resolved = resolve_payload(method, "/v1/console/card-templates/0xd3adb00b5", body)

        assert json.loads(resolved.payload_to_sign) == body

    def test_bodiless_action(self):
        """Test bodiless action requests sign the resource id."""
        resolved = resolve_payload("POST", "/v1/key-cards/0xc4rd1d/suspend")

        assert resolved.payload_to_send == ""
        assert resolved.payload_to_sign == '{"id":"0xc4rd1d"}'
        assert resolved.resource_id == "0xc4rd1d"

    def test_get_ignores_body(self):
        """Test GET requests never sign a body."""
        resolved = resolve_payload("GET", "/v1/key-cards/0xc4rd1d", {"unused": True})

        assert resolved.payload_to_send == ""
        assert resolved.payload_to_sign == '{"id":"0xc4rd1d"}'

    def test_empty_body_treated_as_bodiless(self):
        """Test an empty body falls back to the path resource id."""
        resolved = resolve_payload("PATCH", "/v1/key-cards/0xc4rd1d", {})

        assert resolved.payload_to_send == ""
        assert resolved.resource_id == "0xc4rd1d"

    def test_no_resource_id(self):
        """Test short paths sign the empty object."""
        resolved = resolve_payload("GET", "/v1")

        assert resolved.payload_to_sign == EMPTY_PAYLOAD == "{}"
        assert resolved.resource_id is None

    def test_lowercase_method(self):
        """Test methods are matched case-insensitively."""
        resolved = resolve_payload("get", "/v1/key-cards/abc", {"unused": True})
        assert resolved.payload_to_sign == '{"id":"abc"}'


class TestHelpers:
    """Test serialization helpers."""

    def test_serialize_compact(self):
        """Test JSON serialization has no whitespace."""
        assert serialize({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'

    def test_sig_payload_param(self):
        """Test sig_payload is fully URL encoded."""
        assert sig_payload_param('{"id":"0xc4rd1d"}') == "sig_payload=%7B%22id%22%3A%220xc4rd1d%22%7D"
