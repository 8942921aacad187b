"""Requirement model: an authentication obligation on a signer for a document."""

from signkit.contracts.requirement import RequirementContract
from signkit.models.base import Attribute, LinkedModel
from signkit.models.enums import ResourceType


class Requirement(LinkedModel):
    contract = RequirementContract()
    resource_type = ResourceType.REQUIREMENTS

    action = Attribute()
    auth = Attribute()
