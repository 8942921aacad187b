"""Qualification model: the role a signer plays on a document."""

from signkit.contracts.qualification import QualificationContract
from signkit.models.base import Attribute, LinkedModel
from signkit.models.enums import ResourceType


class Qualification(LinkedModel):
    contract = QualificationContract()
    resource_type = ResourceType.QUALIFICATIONS

    action = Attribute()
    role = Attribute()
