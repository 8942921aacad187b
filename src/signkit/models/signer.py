"""Signer model: a participant in an envelope."""

from signkit.contracts.signer import SignerContract
from signkit.models.base import Attribute, SigningModel
from signkit.models.communicate_events import CommunicateEvents
from signkit.models.enums import ResourceType


class Signer(SigningModel):
    contract = SignerContract(events_contract=CommunicateEvents.contract)
    resource_type = ResourceType.SIGNERS

    name = Attribute()
    email = Attribute()
    phone_number = Attribute()
    has_documentation = Attribute()
    documentation = Attribute()
    birthday = Attribute()
    refusable = Attribute()
    group = Attribute()
    location_required_enabled = Attribute()

    @property
    def documentation_required(self) -> bool | None:
        return self._attributes.get("has_documentation")

    @property
    def communicate_events(self) -> CommunicateEvents | None:
        events = self._attributes.get("communicate_events")
        if not isinstance(events, dict):
            return None
        return CommunicateEvents.build(events)
