from .user import UserCreated, UserResponse
from .trip import TripList, TripCreated, JoinRequestCreated, JoinRequestListResponse, JoinRequestResolved
from .notification import NotificationListResponse, NotificationCountResponse
from .chat import ChatSummaryList

__all__ = [
  'UserCreated', 'UserResponse',
  'TripList', 'TripCreated', 'JoinRequestCreated', 'JoinRequestListResponse', 'JoinRequestResolved',
  'NotificationListResponse', 'NotificationCountResponse',
  'ChatSummaryList',
]
