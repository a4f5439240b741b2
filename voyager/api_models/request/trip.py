from pydantic import BaseModel, Field
from typing import Annotated

class TripCreate(BaseModel):
  title: Annotated[str, Field(min_length=1, max_length=128)]
  creator_username: Annotated[str, Field(min_length=1)]
  type: Annotated[str, Field(default='solo', examples=['solo', 'group'])]
  origin: Annotated[str | None, Field(default=None)]
  destination: Annotated[str | None, Field(default=None)]
  participants: Annotated[list[str], Field(default_factory=list)]

class TripJoinRequest(BaseModel):
  requester_username: Annotated[str, Field(min_length=1)]
  message: Annotated[str, Field(default='')]

class TripJoinResponse(BaseModel):
  action: Annotated[str, Field(examples=['approve', 'reject'])]
  responder_username: Annotated[str, Field(min_length=1)]
