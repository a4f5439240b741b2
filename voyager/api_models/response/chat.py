from pydantic import BaseModel
from voyager.api_models.default import ChatSummary

class ChatSummaryList(BaseModel):
  chats: list[ChatSummary]
