"""Document contract: filename shape and base64 payload checks."""

from pydantic import BaseModel, ConfigDict

from signkit.contracts import helpers
from signkit.contracts.base import Contract, RuleContext, rule


class DocumentParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    filename: str
    content_base64: str


class DocumentContract(Contract):
    schema = DocumentParams
    entity = "document"

    @rule("filename")
    def check_filename(self, ctx: RuleContext, filename: str) -> None:
        helpers.check_filename(ctx, "filename", filename)

    @rule("content_base64")
    def check_content(self, ctx: RuleContext, content_base64: str) -> None:
        # Only the extension matters here, even if the filename failed its own rules.
        helpers.check_content(ctx, "content_base64", content_base64, ctx.values.get("filename"))
