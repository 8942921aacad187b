"""Envelope contract."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from signkit.contracts import constants as c
from signkit.contracts import helpers
from signkit.contracts.base import Contract, RuleContext, rule


class EnvelopeParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    locale: str | None = None
    status: str | None = None
    sequence_enabled: bool | None = None
    auto_close: bool | None = None
    block_after_refusal: bool | None = None
    deadline_at: datetime | None = None
    remind_interval: int | None = None
    external_id: str | None = None
    default_subject: str | None = None
    default_message: str | None = None


class EnvelopeContract(Contract):
    schema = EnvelopeParams
    entity = "envelope"

    @rule("name")
    def check_name(self, ctx: RuleContext, name: str) -> None:
        helpers.check_max_length(ctx, "name", name, c.MAX_ENVELOPE_NAME_LENGTH)

    @rule("locale")
    def check_locale(self, ctx: RuleContext, locale: str) -> None:
        helpers.check_enum(ctx, "locale", locale, c.VALID_LOCALES, c.VALID_LOCALES_MESSAGE)

    @rule("status")
    def check_status(self, ctx: RuleContext, status: str) -> None:
        helpers.check_enum(ctx, "status", status, c.VALID_STATUSES, c.VALID_STATUSES_MESSAGE)

    @rule("deadline_at")
    def check_deadline(self, ctx: RuleContext, deadline_at: datetime) -> None:
        helpers.check_deadline(ctx, "deadline_at", deadline_at)

    @rule("remind_interval")
    def check_remind_interval(self, ctx: RuleContext, remind_interval: int) -> None:
        helpers.check_enum(
            ctx,
            "remind_interval",
            remind_interval,
            c.VALID_REMIND_INTERVALS,
            c.VALID_REMIND_INTERVALS_MESSAGE,
        )

    @rule("external_id")
    def check_external_id(self, ctx: RuleContext, external_id: str) -> None:
        helpers.check_max_length(ctx, "external_id", external_id, c.MAX_EXTERNAL_ID_LENGTH)

    @rule("default_subject")
    def check_default_subject(self, ctx: RuleContext, default_subject: str) -> None:
        helpers.check_max_length(ctx, "default_subject", default_subject, c.MAX_SUBJECT_LENGTH)
