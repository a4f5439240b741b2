import logging
from fastapi import APIRouter, Depends, HTTPException, status
import voyager.api_models.request as moreq
import voyager.api_models.response as mores
import voyager.api_models.default as modef
from voyager.internal.dependencies import GroupChatSync, get_chat_sync
from voyager.internal.exceptions import InternalError

log = logging.getLogger(__name__)

router = APIRouter(prefix="/v2/chat", tags=["chat"])


@router.get("/trip/{trip_id}", response_model=modef.GroupChat, responses={404: {"model": modef.ErrorResponse}})
def get_group_chat(trip_id: int, chats: GroupChatSync = Depends(get_chat_sync)):
  """Group chat of a trip with its full message history"""
  try:
    return chats.get_group_chat(trip_id)

  except HTTPException:
    raise
  except Exception as e:
    log.exception(f"Error retrieving chat of trip {trip_id}")
    raise InternalError(f"Error retrieving group chat: {str(e)}")


@router.get("/user/{username}", response_model=mores.ChatSummaryList)
def get_user_chats(username: str, chats: GroupChatSync = Depends(get_chat_sync)):
  try:
    return mores.ChatSummaryList(chats=chats.get_for_user(username))

  except Exception as e:
    log.exception(f"Error retrieving chats of {username}")
    raise InternalError(f"Error retrieving chats: {str(e)}")


@router.post("/trip/{trip_id}/messages", response_model=modef.ChatMessage, status_code=status.HTTP_201_CREATED,
             responses={404: {"model": modef.ErrorResponse}, 403: {"model": modef.ErrorResponse}})
def post_chat_message(trip_id: int, request: moreq.ChatMessagePost,
                            chats: GroupChatSync = Depends(get_chat_sync)):
  """Append a message to the trip chat. Only members may post."""
  try:
    return chats.append_message(trip_id, request.sender, request.content)

  except HTTPException:
    raise
  except Exception as e:
    log.exception(f"Error posting message to trip {trip_id}")
    raise InternalError(f"Error posting message: {str(e)}")
