from fastapi import Depends
from sqlalchemy.orm import Session
from .database import connect_to_db
from .trips import TripDirectory
from .users import UserDirectory
from .group_chat import GroupChatSync
from .join_requests import JoinRequestWorkflow
from .notifications import NotificationProjector


def get_trip_directory(db: Session = Depends(connect_to_db)) -> TripDirectory:
  return TripDirectory(db)

def get_user_directory(db: Session = Depends(connect_to_db)) -> UserDirectory:
  return UserDirectory(db)

def get_chat_sync(db: Session = Depends(connect_to_db)) -> GroupChatSync:
  return GroupChatSync(db)

def get_join_workflow(db: Session = Depends(connect_to_db)) -> JoinRequestWorkflow:
  return JoinRequestWorkflow(db, TripDirectory(db), GroupChatSync(db))

def get_notification_projector(db: Session = Depends(connect_to_db)) -> NotificationProjector:
  return NotificationProjector(db)
