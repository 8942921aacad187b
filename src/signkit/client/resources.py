"""Per-resource endpoint wrappers.

Each wrapper only builds the URL and forwards to :meth:`ApiClient.request`.
Payload-taking methods accept either a model instance, serialized with
``to_json_api()`` and checked against the resource document schema, or a
raw mapping that is sent as given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from signkit.models.base import SigningModel
from signkit.schemas.validator import validate_resource_document

if TYPE_CHECKING:
    from signkit.client.base import ApiClient

Payload = SigningModel | dict[str, Any]


def to_payload(payload: Payload) -> dict[str, Any]:
    """Turn a model into its resource document; pass raw mappings through."""
    if isinstance(payload, SigningModel):
        document = payload.to_json_api()
        validate_resource_document(document)
        return document
    return dict(payload)


def with_query(url: str, params: dict[str, Any] | None) -> str:
    if not params:
        return url
    return f"{url}?{urlencode(params, doseq=True)}"


class Resource:
    """Base wrapper bound to one client."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    def _request(self, method: str, url: str, payload: Payload | None = None) -> Any:
        body = to_payload(payload) if payload is not None else None
        return self.client.request(method, url, body)


class EnvelopeResource(Resource):
    def create(self, payload: Payload) -> Any:
        return self._request("POST", self.client.api_url("envelopes"), payload)

    def get(self, envelope_id: str) -> Any:
        return self._request("GET", self.client.api_url("envelopes", envelope_id))

    def update(self, envelope_id: str, payload: Payload) -> Any:
        return self._request("PUT", self.client.api_url("envelopes", envelope_id), payload)

    def delete(self, envelope_id: str) -> Any:
        return self._request("DELETE", self.client.api_url("envelopes", envelope_id))

    def list(self, params: dict[str, Any] | None = None) -> Any:
        return self._request("GET", with_query(self.client.api_url("envelopes"), params))

    def send_for_signing(self, envelope_id: str) -> Any:
        return self._request("POST", self.client.api_url("envelopes", envelope_id, "send"))

    def status(self, envelope_id: str) -> Any:
        return self._request("GET", self.client.api_url("envelopes", envelope_id, "status"))

    def download(self, envelope_id: str) -> Any:
        return self._request("GET", self.client.api_url("envelopes", envelope_id, "download"))


class DocumentResource(Resource):
    def create(self, payload: Payload) -> Any:
        return self._request("POST", self.client.api_url("documents"), payload)

    def get(self, document_id: str) -> Any:
        return self._request("GET", self.client.api_url("documents", document_id))

    def update(self, document_id: str, payload: Payload) -> Any:
        return self._request("PUT", self.client.api_url("documents", document_id), payload)

    def delete(self, document_id: str) -> Any:
        return self._request("DELETE", self.client.api_url("documents", document_id))


class SignerResource(Resource):
    """Signers of one envelope."""

    def create(self, envelope_id: str, payload: Payload) -> Any:
        return self._request("POST", self.client.api_url("envelopes", envelope_id, "signers"), payload)

    def show(self, envelope_id: str, signer_id: str) -> Any:
        return self._request("GET", self.client.api_url("envelopes", envelope_id, "signers", signer_id))

    def list(self, envelope_id: str) -> Any:
        return self._request("GET", self.client.api_url("envelopes", envelope_id, "signers"))

    def filter(self, envelope_id: str, params: dict[str, Any]) -> Any:
        url = with_query(self.client.api_url("envelopes", envelope_id, "signers"), params)
        return self._request("GET", url)

    def delete(self, envelope_id: str, signer_id: str) -> Any:
        return self._request(
            "DELETE", self.client.api_url("envelopes", envelope_id, "signers", signer_id)
        )


class RequirementResource(Resource):
    """Requirements of one envelope.

    Qualifications and authentications share the same endpoint; only the
    payload differs.
    """

    def create_qualification(self, envelope_id: str, payload: Payload) -> Any:
        return self._create(envelope_id, payload)

    def create_authentication(self, envelope_id: str, payload: Payload) -> Any:
        return self._create(envelope_id, payload)

    def show(self, envelope_id: str, requirement_id: str) -> Any:
        return self._request(
            "GET", self.client.api_url("envelopes", envelope_id, "requirements", requirement_id)
        )

    def delete(self, envelope_id: str, requirement_id: str) -> Any:
        return self._request(
            "DELETE", self.client.api_url("envelopes", envelope_id, "requirements", requirement_id)
        )

    def _create(self, envelope_id: str, payload: Payload) -> Any:
        return self._request(
            "POST", self.client.api_url("envelopes", envelope_id, "requirements"), payload
        )


class NotificationResource(Resource):
    def notify_signer(self, envelope_id: str, signer_id: str, payload: Payload) -> Any:
        url = self.client.api_url("envelopes", envelope_id, "signers", signer_id, "notify")
        return self._request("POST", url, payload)

    def notify_envelope_signers(self, envelope_id: str, payload: Payload) -> Any:
        return self._request("POST", self.client.api_url("envelopes", envelope_id, "notify"), payload)
