"""Envelope model: the top-level signing transaction."""

from signkit.contracts.envelope import EnvelopeContract
from signkit.models.base import Attribute, SigningModel
from signkit.models.enums import ResourceType


class Envelope(SigningModel):
    contract = EnvelopeContract()
    resource_type = ResourceType.ENVELOPES

    name = Attribute()
    locale = Attribute()
    status = Attribute()
    sequence_enabled = Attribute()
    auto_close = Attribute()
    block_after_refusal = Attribute()
    deadline_at = Attribute()
    remind_interval = Attribute()
    external_id = Attribute()
    default_subject = Attribute()
    default_message = Attribute()
