from .users import Users
from .trips import Trips, TripsParticipants, TripsJoinRequests, format_route
from .chats import GroupChats, GroupChatsParticipants, GroupChatsMessages

__all__ = ['Users',
           'Trips', 'TripsParticipants', 'TripsJoinRequests', 'format_route',
           'GroupChats', 'GroupChatsParticipants', 'GroupChatsMessages'
           ]
