from pydantic import BaseModel
from voyager.api_models.default import User

class UserCreated(BaseModel):
  status: bool
  msg: str
  user_id: int

class UserResponse(User):
  user_id: int
