"""Per-event communication preferences embedded in a signer."""

from typing import Any

from signkit.contracts import constants as c
from signkit.contracts.communicate_events import CommunicateEventsContract
from signkit.models.base import SigningModel
from signkit.models.enums import CommunicationChannel


class CommunicateEvents(SigningModel):
    """Channel used for each signer notification.

    A channel that was not set falls back to ``email``.
    """

    contract = CommunicateEventsContract()

    @property
    def signature_request(self) -> str:
        return self._attributes.get("signature_request") or c.DEFAULT_CHANNEL

    @property
    def signature_reminder(self) -> str:
        return self._attributes.get("signature_reminder") or c.DEFAULT_CHANNEL

    @property
    def document_signed(self) -> str:
        return self._attributes.get("document_signed") or c.DEFAULT_CHANNEL

    @property
    def channels(self) -> tuple[str, str, str]:
        return (self.signature_request, self.signature_reminder, self.document_signed)

    @property
    def requires_email(self) -> bool:
        return CommunicationChannel.EMAIL in self.channels

    @property
    def requires_phone(self) -> bool:
        return not c.PHONE_CHANNELS.isdisjoint(self.channels)

    @property
    def uses_sms(self) -> bool:
        return CommunicationChannel.SMS in self.channels

    @property
    def uses_whatsapp(self) -> bool:
        return CommunicationChannel.WHATSAPP in self.channels

    def to_json_api(self) -> dict[str, Any]:
        """Flat channel mapping with defaults applied; embedded, not a resource."""
        self.ensure_valid()
        return {
            "signature_request": str(self.signature_request),
            "signature_reminder": str(self.signature_reminder),
            "document_signed": str(self.document_signed),
        }
