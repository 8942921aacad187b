"""Requirement contract."""

from pydantic import BaseModel, ConfigDict

from signkit.contracts import constants as c
from signkit.contracts import helpers
from signkit.contracts.base import Contract, RuleContext, rule


class RequirementParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    action: str
    auth: str
    document_id: str
    signer_id: str


class RequirementContract(Contract):
    schema = RequirementParams
    entity = "requirement"

    @rule("action")
    def check_action(self, ctx: RuleContext, action: str) -> None:
        helpers.check_enum(
            ctx, "action", action, c.VALID_REQUIREMENT_ACTIONS, c.VALID_REQUIREMENT_ACTIONS_MESSAGE
        )

    @rule("auth")
    def check_auth(self, ctx: RuleContext, auth: str) -> None:
        helpers.check_enum(ctx, "auth", auth, c.VALID_AUTHS, c.VALID_AUTHS_MESSAGE)

    @rule("document_id")
    def check_document_id(self, ctx: RuleContext, document_id: str) -> None:
        helpers.check_uuid(ctx, "document_id", document_id)

    @rule("signer_id")
    def check_signer_id(self, ctx: RuleContext, signer_id: str) -> None:
        helpers.check_uuid(ctx, "signer_id", signer_id)
