from pydantic import BaseModel, Field
from typing import Annotated

class UserCreate(BaseModel):
  username: Annotated[str, Field(min_length=1, max_length=64)]
  email: Annotated[str, Field(min_length=3, max_length=128)]
  display_name: Annotated[str | None, Field(default=None)]
  bio: Annotated[str | None, Field(default=None)]
  profile_picture_path: Annotated[str | None, Field(default=None)]
  cover_photo_path: Annotated[str | None, Field(default=None)]

class UserEdit(BaseModel):
  username: str
  display_name: Annotated[str | None, Field(default=None)]
  email: Annotated[str | None, Field(default=None)]
  bio: Annotated[str | None, Field(default=None)]
  profile_picture_path: Annotated[str | None, Field(default=None)]
  cover_photo_path: Annotated[str | None, Field(default=None)]
