"""Qualification contract, including the action/role compatibility rule."""

from pydantic import BaseModel, ConfigDict

from signkit.contracts import constants as c
from signkit.contracts import helpers
from signkit.contracts.base import Contract, RuleContext, rule
from signkit.models.enums import ErrorKind, QualificationAction, QualificationRole


class QualificationParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    action: str
    role: str
    document_id: str
    signer_id: str


class QualificationContract(Contract):
    schema = QualificationParams
    entity = "qualification"

    @rule("action")
    def check_action(self, ctx: RuleContext, action: str) -> None:
        helpers.check_enum(
            ctx,
            "action",
            action,
            c.VALID_QUALIFICATION_ACTIONS,
            c.VALID_QUALIFICATION_ACTIONS_MESSAGE,
        )

    @rule("role")
    def check_role(self, ctx: RuleContext, role: str) -> None:
        helpers.check_enum(ctx, "role", role, c.VALID_ROLES, c.VALID_ROLES_MESSAGE)

    @rule("document_id")
    def check_document_id(self, ctx: RuleContext, document_id: str) -> None:
        helpers.check_uuid(ctx, "document_id", document_id)

    @rule("signer_id")
    def check_signer_id(self, ctx: RuleContext, signer_id: str) -> None:
        helpers.check_uuid(ctx, "signer_id", signer_id)

    @rule("action", "role")
    def check_action_role_compatibility(self, ctx: RuleContext, action: str, role: str) -> None:
        if action == QualificationAction.SIGN and role != QualificationRole.SIGNER:
            ctx.failure("action", c.ACTION_ROLE_COMPATIBILITY_MESSAGE, ErrorKind.DEPENDENCY)
