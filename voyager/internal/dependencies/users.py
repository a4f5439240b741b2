import logging
from sqlalchemy import or_
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import voyager.db.models as model
import voyager.api_models.request as moreq
from voyager.internal.exceptions import NotFound, Conflict, InvalidOperation

log = logging.getLogger(__name__)


class UserDirectory:
  """Profile storage. Nothing in the join request flow reads it, usernames are trusted as given."""

  def __init__(self, db: Session):
    self.db = db

  def create(self, request: moreq.UserCreate) -> model.Users:
    existing = self.db.query(model.Users).filter(
      or_(model.Users.username == request.username, model.Users.email == request.email)
    ).first()
    if existing:
      raise Conflict("Username or email already taken")

    user = model.Users(**request.model_dump())
    try:
      self.db.add(user)
      self.db.commit()
    except IntegrityError:
      self.db.rollback()
      raise Conflict("Username or email already taken")

    log.info(f"User {user.username} created")
    return user

  def get(self, identifier: str) -> model.Users:
    """Looks a user up by username or email."""
    user = self.db.query(model.Users).filter(
      or_(model.Users.username == identifier, model.Users.email == identifier)
    ).first()
    if not user:
      raise NotFound("User not found")
    return user

  def update(self, request: moreq.UserEdit) -> model.Users:
    user = self.db.query(model.Users).filter(model.Users.username == request.username).first()
    if not user:
      raise NotFound("User not found")

    changes = request.model_dump(exclude_unset=True, exclude={'username'})
    if 'email' in changes and not changes['email']:
      raise InvalidOperation("Email cannot be empty")

    for field, value in changes.items():
      setattr(user, field, value)

    try:
      self.db.commit()
    except IntegrityError:
      self.db.rollback()
      raise Conflict("Email already taken")

    log.info(f"User {user.username} updated ({', '.join(changes) or 'no changes'})")
    return user
