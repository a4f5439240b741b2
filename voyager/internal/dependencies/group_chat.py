import logging
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
import voyager.db.models as model
import voyager.api_models.default as modef
from voyager.db.enums import JoinRequestStatus
from voyager.internal.exceptions import NotFound, Forbidden
from .timedates import get_utc_now

log = logging.getLogger(__name__)


def message_to_model(message: model.GroupChatsMessages) -> modef.ChatMessage:
  return modef.ChatMessage(
    sender=message.sender,
    content=message.content,
    timestamp=message.sent_at
  )


def chat_to_model(chat: model.GroupChats) -> modef.GroupChat:
  return modef.GroupChat(
    chat_id=chat.id,
    trip_id=chat.id_trip,
    creator_username=chat.creator_username,
    participants=[p.username for p in chat.participants],
    messages=[message_to_model(m) for m in chat.messages],
    created_at=chat.created_at
  )


class GroupChatSync:
  """
  Owns the trip group chats. A chat is created lazily by the first approval for its trip
  and its membership only ever grows. Every membership write is a set union, so replaying
  an approval is harmless; get_group_chat and on_approval both replay all approved
  requests of the trip, which repairs a membership step that failed after an approval.
  """

  def __init__(self, db: Session):
    self.db = db

  def get_chat(self, trip_id: int) -> model.GroupChats | None:
    return self.db.query(model.GroupChats).filter(
      model.GroupChats.id_trip == trip_id
    ).first()

  def on_approval(self, trip_id: int, creator_username: str, new_participant: str) -> model.GroupChats:
    chat = self._get_or_create(trip_id, creator_username)
    members = [creator_username, new_participant] + self._approved_requesters(trip_id)
    self._add_participants(chat, members)
    return chat

  def reconcile(self, trip_id: int) -> model.GroupChats | None:
    """Brings the chat of trip_id in line with its approved requests. Returns None if it should not exist."""
    approved = self.db.query(model.TripsJoinRequests).filter(
      model.TripsJoinRequests.id_trip == trip_id,
      model.TripsJoinRequests.status == JoinRequestStatus.approved
    ).order_by(model.TripsJoinRequests.id).all()

    chat = self.get_chat(trip_id)
    if not approved:
      return chat

    if not chat:
      log.warning(f"Trip {trip_id} has approved requests but no chat, creating it")
      chat = self._get_or_create(trip_id, approved[0].trip_creator_username)

    members = [chat.creator_username] + [r.requester_username for r in approved]
    self._add_participants(chat, members)
    return chat

  def get_group_chat(self, trip_id: int) -> modef.GroupChat:
    chat = self.reconcile(trip_id)
    if not chat:
      raise NotFound(f"No group chat exists for trip {trip_id}")
    return chat_to_model(chat)

  def append_message(self, trip_id: int, sender: str, content: str) -> modef.ChatMessage:
    chat = self.get_chat(trip_id)
    if not chat:
      raise NotFound(f"No group chat exists for trip {trip_id}")

    is_member = self.db.query(model.GroupChatsParticipants).filter(
      model.GroupChatsParticipants.id_chat == chat.id,
      model.GroupChatsParticipants.username == sender
    ).first()
    if not is_member:
      raise Forbidden(f"{sender} is not a member of this chat")

    message = model.GroupChatsMessages(
      sender=sender,
      content=content,
      sent_at=get_utc_now()
    )
    chat.messages.append(message)
    self.db.commit()
    log.info(f"Message {message.id} posted to chat {chat.id} by {sender}")
    return message_to_model(message)

  def get_for_user(self, username: str) -> list[modef.ChatSummary]:
    stats = self.db.query(
      model.GroupChatsMessages.id_chat.label('id_chat'),
      func.count(model.GroupChatsMessages.id).label('message_count'),
      func.max(model.GroupChatsMessages.id).label('last_id')
    ).group_by(model.GroupChatsMessages.id_chat).subquery()

    rows = self.db.query(
      model.GroupChats, model.Trips.title, stats.c.message_count, model.GroupChatsMessages
    ).join(
      model.GroupChatsParticipants, model.GroupChatsParticipants.id_chat == model.GroupChats.id
    ).outerjoin(
      model.Trips, model.Trips.id == model.GroupChats.id_trip
    ).outerjoin(
      stats, stats.c.id_chat == model.GroupChats.id
    ).outerjoin(
      model.GroupChatsMessages, model.GroupChatsMessages.id == stats.c.last_id
    ).filter(
      model.GroupChatsParticipants.username == username
    ).options(selectinload(model.GroupChats.participants)).all()

    summaries = []
    for chat, trip_title, message_count, last_message in rows:
      summaries.append(modef.ChatSummary(
        chat_id=chat.id,
        trip_id=chat.id_trip,
        trip_title=trip_title,
        creator_username=chat.creator_username,
        participants=[p.username for p in chat.participants],
        message_count=message_count or 0,
        last_message=message_to_model(last_message) if last_message else None,
        created_at=chat.created_at
      ))

    # Most recently active first
    summaries.sort(
      key=lambda s: (s.last_message.timestamp if s.last_message else s.created_at, s.chat_id),
      reverse=True
    )
    return summaries

  def _approved_requesters(self, trip_id: int) -> list[str]:
    rows = self.db.query(model.TripsJoinRequests.requester_username).filter(
      model.TripsJoinRequests.id_trip == trip_id,
      model.TripsJoinRequests.status == JoinRequestStatus.approved
    ).all()
    return [row[0] for row in rows]

  def _get_or_create(self, trip_id: int, creator_username: str) -> model.GroupChats:
    chat = self.get_chat(trip_id)
    if chat:
      return chat

    try:
      chat = model.GroupChats(
        id_trip=trip_id,
        creator_username=creator_username,
        created_at=get_utc_now()
      )
      self.db.add(chat)
      self.db.commit()
    except IntegrityError:
      # Another approval created it first
      self.db.rollback()
      return self.get_chat(trip_id)

    log.info(f"Group chat {chat.id} created for trip {trip_id}")
    return chat

  def _add_participants(self, chat: model.GroupChats, usernames: list[str]):
    for username in dict.fromkeys(usernames):
      if username in [p.username for p in chat.participants]:
        continue

      try:
        chat.participants.append(model.GroupChatsParticipants(username=username))
        self.db.commit()
      except IntegrityError:
        self.db.rollback()
        self.db.refresh(chat)
        continue

      log.info(f"{username} joined group chat {chat.id}")
