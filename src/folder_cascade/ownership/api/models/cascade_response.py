"""Cascade response models.

ONLY cascade responses - structures the outcome of a submitted ownership
form for API clients.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...application.commands.cascade_ownership import CascadeOwnershipResult
from ...application.handlers.notification_builder import CascadeNotification


class NotificationResponse(BaseModel):
    """Operator-facing notification."""

    level: str = Field(..., description="Notification severity (info or error)")
    key: str = Field(..., description="Message catalogue key")
    message: str = Field(..., description="Rendered message")

    @classmethod
    def from_notification(cls, notification: CascadeNotification) -> 'NotificationResponse':
        return cls(
            level=notification.level.value,
            key=notification.key,
            message=notification.message
        )


class CascadeResponse(BaseModel):
    """Outcome of an ownership form submission."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "cascaded": True,
                "outcome": "success",
                "item_count": 5,
                "subfolder_count": 2,
                "notification": {
                    "level": "info",
                    "key": "CASCADE_PERMS.SuccessCascade",
                    "message": "Updated 5 document(s) across 2 sub-folder(s)."
                }
            }
        }
    )

    cascaded: bool = Field(..., description="Whether a cascade was requested and run")
    outcome: Optional[str] = Field(default=None, description="Terminal cascade outcome")
    item_count: int = Field(default=0, ge=0, description="Documents updated")
    subfolder_count: int = Field(default=0, ge=0, description="Sub-folders visited, root excluded")
    notification: Optional[NotificationResponse] = Field(default=None)

    @classmethod
    def from_result(
        cls,
        result: Optional[CascadeOwnershipResult],
        notification: Optional[CascadeNotification] = None
    ) -> 'CascadeResponse':
        if result is None:
            return cls(cascaded=False)
        return cls(
            cascaded=True,
            outcome=result.outcome.value,
            item_count=result.item_count,
            subfolder_count=result.subfolder_count,
            notification=NotificationResponse.from_notification(notification) if notification else None
        )
