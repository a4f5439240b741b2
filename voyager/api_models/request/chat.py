from pydantic import BaseModel, Field
from typing import Annotated

class ChatMessagePost(BaseModel):
  sender: Annotated[str, Field(min_length=1)]
  content: Annotated[str, Field(min_length=1)]
