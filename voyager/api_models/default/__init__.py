from .default import ErrorResponse, DefaultResponse, User, Trip, JoinRequest, ChatMessage, GroupChat, ChatSummary, Notification

__all__ = ['ErrorResponse', 'DefaultResponse', 'User', 'Trip', 'JoinRequest',
           'ChatMessage', 'GroupChat', 'ChatSummary', 'Notification']
