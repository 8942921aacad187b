"""Notification model: optional free-text alert sent to signers."""

from signkit.contracts.notification import NotificationContract
from signkit.models.base import Attribute, SigningModel
from signkit.models.enums import ResourceType


class Notification(SigningModel):
    contract = NotificationContract()
    resource_type = ResourceType.NOTIFICATIONS

    message = Attribute()
