"""Document model: a file attached to an envelope."""

from signkit.contracts.document import DocumentContract
from signkit.contracts.helpers import split_data_uri
from signkit.models.base import Attribute, SigningModel
from signkit.models.enums import ResourceType


class Document(SigningModel):
    contract = DocumentContract()
    resource_type = ResourceType.DOCUMENTS

    filename = Attribute()
    content_base64 = Attribute()

    @property
    def mime_type(self) -> str | None:
        """MIME type declared by a ``data:`` URI prefix, if any."""
        if not isinstance(self.content_base64, str):
            return None
        return split_data_uri(self.content_base64)[0]
