"""Signer contract.

Besides per-field format checks this carries the two dependency rules of
the signer:

* ``has_documentation=False`` forbids sending ``documentation`` and
  ``birthday``;
* channels requested in ``communicate_events`` require the matching
  contact field (``email`` for email, ``phone_number`` for sms/whatsapp).
  The nested preferences are validated with their own contract first and
  the dependency is only evaluated when they are well formed.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict

from signkit.contracts import constants as c
from signkit.contracts import helpers
from signkit.contracts.base import Contract, RuleContext, rule
from signkit.contracts.communicate_events import CommunicateEventsContract
from signkit.models.enums import ErrorKind


class SignerParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    email: str | None = None
    phone_number: str | None = None
    has_documentation: bool | None = None
    documentation: str | None = None
    birthday: date | None = None
    refusable: bool | None = None
    group: int | None = None
    location_required_enabled: bool | None = None
    communicate_events: dict[str, Any] | None = None


class SignerContract(Contract):
    schema = SignerParams
    entity = "signer"

    def __init__(self, events_contract: CommunicateEventsContract | None = None):
        self.events_contract = events_contract or CommunicateEventsContract()

    @rule("name")
    def check_name(self, ctx: RuleContext, name: str) -> None:
        if not name.strip():
            ctx.failure("name", c.EMPTY_NAME_MESSAGE, ErrorKind.RANGE)
            return
        if not helpers.check_max_length(ctx, "name", name, c.MAX_SIGNER_NAME_LENGTH):
            return
        if len(name.split()) < 2:
            ctx.failure("name", c.NAME_FORMAT_MESSAGE)
        if c.DIGIT_REGEX.search(name):
            ctx.failure("name", c.NAME_NO_NUMBERS_MESSAGE)

    @rule("email")
    def check_email(self, ctx: RuleContext, email: str) -> None:
        helpers.check_email(ctx, "email", email)

    @rule("phone_number")
    def check_phone_number(self, ctx: RuleContext, phone_number: str) -> None:
        helpers.check_phone(ctx, "phone_number", phone_number)

    @rule("documentation")
    def check_documentation(self, ctx: RuleContext, documentation: str) -> None:
        helpers.check_documentation(ctx, "documentation", documentation)

    @rule("birthday")
    def check_birthday(self, ctx: RuleContext, birthday: date) -> None:
        helpers.check_age(ctx, "birthday", birthday)

    @rule("group")
    def check_group(self, ctx: RuleContext, group: int) -> None:
        helpers.check_positive(ctx, "group", group)

    @rule("has_documentation")
    def check_documentation_dependency(self, ctx: RuleContext, has_documentation: bool) -> None:
        if has_documentation is not False:
            return
        for field in ("documentation", "birthday"):
            if ctx.supplied(field):
                ctx.failure(field, c.DOCUMENTATION_DEPENDENCY_MESSAGE, ErrorKind.DEPENDENCY)

    @rule("communicate_events")
    def check_communication_dependency(self, ctx: RuleContext, events: dict[str, Any]) -> None:
        result = self.events_contract.validate(events, now=ctx.now)
        if not result.ok:
            for error in result.errors:
                ctx.failure(f"communicate_events.{error.field}", error.message, error.kind)
            return

        ctx.values["communicate_events"] = result.attributes
        # Only explicitly chosen channels count; absent keys fall back to the
        # API default and do not make a contact field mandatory.
        channels = [value for value in result.attributes.values() if value is not None]
        if helpers.needs_email(channels) and not ctx.supplied("email"):
            ctx.failure("email", c.EMAIL_REQUIRED_MESSAGE, ErrorKind.DEPENDENCY)
        if helpers.needs_phone(channels) and not ctx.supplied("phone_number"):
            ctx.failure("phone_number", c.PHONE_REQUIRED_MESSAGE, ErrorKind.DEPENDENCY)
