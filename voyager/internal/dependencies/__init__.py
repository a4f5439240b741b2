from .timedates import get_utc_now
from .database import connect_to_db
from .trips import TripDirectory, trip_to_model
from .users import UserDirectory
from .group_chat import GroupChatSync, chat_to_model, message_to_model
from .join_requests import JoinRequestWorkflow, join_request_to_model
from .notifications import NotificationProjector
from .components import get_trip_directory, get_user_directory, get_chat_sync, get_join_workflow, get_notification_projector

__all__ = ['get_utc_now',
           'connect_to_db',
           'TripDirectory', 'trip_to_model',
           'UserDirectory',
           'GroupChatSync', 'chat_to_model', 'message_to_model',
           'JoinRequestWorkflow', 'join_request_to_model',
           'NotificationProjector',
           'get_trip_directory', 'get_user_directory', 'get_chat_sync', 'get_join_workflow', 'get_notification_projector'
           ]
