"""Notification contract."""

from pydantic import BaseModel, ConfigDict

from signkit.contracts import constants as c
from signkit.contracts.base import Contract, RuleContext, rule


class NotificationParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str | None = None


class NotificationContract(Contract):
    schema = NotificationParams
    entity = "notification"

    @rule("message")
    def check_message(self, ctx: RuleContext, message: str) -> None:
        if not message.strip():
            ctx.failure("message", c.EMPTY_MESSAGE_MESSAGE)
