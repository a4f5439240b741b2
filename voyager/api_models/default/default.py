from pydantic import BaseModel, Field
from typing import Annotated
from datetime import datetime

class ErrorResponse(BaseModel):
  status: bool
  code: Annotated[str, Field(examples=["NOT_FOUND", "FORBIDDEN", "CONFLICT", "INVALID_OPERATION", "INTERNAL"])]
  msg: str

class DefaultResponse(BaseModel):
  status: bool
  msg: Annotated[str | None, Field(default=None)]

class User(BaseModel):
  username: str
  email: str
  display_name: Annotated[str | None, Field(default=None)]
  bio: Annotated[str | None, Field(default=None)]
  profile_picture_path: Annotated[str | None, Field(default=None)]
  cover_photo_path: Annotated[str | None, Field(default=None)]

  class Config:
    from_attributes = True

class Trip(BaseModel):
  trip_id: int
  title: str
  origin: Annotated[str | None, Field(default=None)]
  destination: Annotated[str | None, Field(default=None)]
  route: Annotated[str | None, Field(default=None)]
  type: Annotated[str, Field(examples=['solo', 'group'])]
  creator_username: str
  participants: list[str]
  created_at: Annotated[datetime, Field(examples=["UTC time"])]

class JoinRequest(BaseModel):
  request_id: int
  trip_id: int
  trip_creator_username: str
  requester_username: str
  message: str
  status: Annotated[str, Field(examples=['pending', 'approved', 'rejected'])]
  created_at: Annotated[datetime, Field(examples=["UTC time"])]
  responder_username: Annotated[str | None, Field(default=None)]
  responded_at: Annotated[datetime | None, Field(default=None)]

class ChatMessage(BaseModel):
  sender: str
  content: str
  timestamp: Annotated[datetime, Field(examples=["UTC time"])]

class GroupChat(BaseModel):
  chat_id: int
  trip_id: int
  creator_username: str
  participants: list[str]
  messages: list[ChatMessage]
  created_at: Annotated[datetime, Field(examples=["UTC time"])]

class ChatSummary(BaseModel):
  chat_id: int
  trip_id: int
  trip_title: Annotated[str | None, Field(default=None)]
  creator_username: str
  participants: list[str]
  message_count: int
  last_message: Annotated[ChatMessage | None, Field(default=None)]
  created_at: Annotated[datetime, Field(examples=["UTC time"])]

class Notification(BaseModel):
  notification_id: Annotated[int, Field(description="Id of the join request the entry was built from")]
  kind: Annotated[str, Field(examples=["JOIN_REQUEST", "REQUEST_APPROVED", "REQUEST_REJECTED"])]
  trip_id: int
  trip_title: Annotated[str | None, Field(default=None)]
  trip_route: Annotated[str | None, Field(default=None)]
  requester_username: Annotated[str | None, Field(default=None)]
  responder_username: Annotated[str | None, Field(default=None)]
  message: str
  timestamp: Annotated[datetime, Field(examples=["UTC time"])]
