"""Contract for a signer's per-event communication channels."""

from pydantic import BaseModel, ConfigDict

from signkit.contracts import constants as c
from signkit.contracts import helpers
from signkit.contracts.base import Contract, RuleContext, rule


class CommunicateEventsParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    signature_request: str | None = None
    signature_reminder: str | None = None
    document_signed: str | None = None


class CommunicateEventsContract(Contract):
    schema = CommunicateEventsParams
    entity = "communicate_events"

    @rule("signature_request")
    def check_signature_request(self, ctx: RuleContext, value: str) -> None:
        helpers.check_enum(
            ctx,
            "signature_request",
            value,
            c.VALID_SIGNATURE_REQUEST,
            c.one_of_message(c.VALID_SIGNATURE_REQUEST),
        )

    @rule("signature_reminder")
    def check_signature_reminder(self, ctx: RuleContext, value: str) -> None:
        helpers.check_enum(
            ctx,
            "signature_reminder",
            value,
            c.VALID_SIGNATURE_REMINDER,
            c.one_of_message(c.VALID_SIGNATURE_REMINDER),
        )

    @rule("document_signed")
    def check_document_signed(self, ctx: RuleContext, value: str) -> None:
        helpers.check_enum(
            ctx,
            "document_signed",
            value,
            c.VALID_DOCUMENT_SIGNED,
            c.one_of_message(c.VALID_DOCUMENT_SIGNED),
        )
