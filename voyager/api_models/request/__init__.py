from .user import UserCreate, UserEdit
from .trip import TripCreate, TripJoinRequest, TripJoinResponse
from .chat import ChatMessagePost

__all__ = [
  'UserCreate', 'UserEdit',
  'TripCreate', 'TripJoinRequest', 'TripJoinResponse',
  'ChatMessagePost'
]
