from .billing_notification_stack import BillingNotificationStack
from .config import StackSettings

__all__ = [
    "BillingNotificationStack",
    "StackSettings",
]
