"""Tests for the CommunicateEvents preferences model."""

import pytest

from signkit.models.communicate_events import CommunicateEvents


class TestCommunicateEventsDefaults:
    def test_absent_keys_default_to_email(self):
        events = CommunicateEvents()
        assert events.is_valid
        assert events.channels == ("email", "email", "email")
        assert events.requires_email
        assert not events.requires_phone

    def test_to_json_api_applies_defaults(self):
        events = CommunicateEvents(signature_request="sms")
        assert events.to_json_api() == {
            "signature_request": "sms",
            "signature_reminder": "email",
            "document_signed": "email",
        }


class TestCommunicateEventsValues:
    @pytest.mark.parametrize("value", ["email", "sms", "whatsapp", "none"])
    def test_signature_request(self, value):
        assert CommunicateEvents.build(signature_request=value).is_valid

    @pytest.mark.parametrize("value", ["none", "email"])
    def test_signature_reminder(self, value):
        assert CommunicateEvents.build(signature_reminder=value).is_valid

    @pytest.mark.parametrize("value", ["email", "whatsapp"])
    def test_document_signed(self, value):
        assert CommunicateEvents.build(document_signed=value).is_valid

    @pytest.mark.parametrize(
        "field,value,message",
        [
            ("signature_request", "fax", "must be one of: email, sms, whatsapp, none"),
            ("signature_reminder", "whatsapp", "must be one of: none, email"),
            ("document_signed", "sms", "must be one of: email, whatsapp"),
        ],
    )
    def test_invalid(self, field, value, message):
        events = CommunicateEvents.build({field: value})
        assert events.errors_hash == {field: [message]}


class TestCommunicateEventsChannels:
    def test_phone_channels(self):
        events = CommunicateEvents(
            signature_request="sms", signature_reminder="none", document_signed="whatsapp"
        )
        assert events.requires_phone
        assert not events.requires_email
        assert events.uses_sms
        assert events.uses_whatsapp

    def test_none_everywhere_but_document_signed(self):
        events = CommunicateEvents(signature_request="none", signature_reminder="none")
        assert events.requires_email
        assert not events.uses_sms
