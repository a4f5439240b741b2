from pydantic import BaseModel
from voyager.api_models.default import Notification

class NotificationListResponse(BaseModel):
  notifications: list[Notification]
  count: int

class NotificationCountResponse(BaseModel):
  count: int
