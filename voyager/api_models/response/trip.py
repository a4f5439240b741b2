from pydantic import BaseModel
from voyager.api_models.default import Trip, JoinRequest

class TripList(BaseModel):
  trips: list[Trip]


class TripCreated(BaseModel):
  status: bool
  msg: str
  trip_id: int


class JoinRequestCreated(BaseModel):
  status: bool
  msg: str
  request_id: int


class JoinRequestListResponse(BaseModel):
  join_requests: list[JoinRequest]


class JoinRequestResolved(BaseModel):
  status: bool
  msg: str
  request: JoinRequest
  chat_synced: bool
