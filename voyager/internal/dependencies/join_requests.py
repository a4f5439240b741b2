import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import voyager.db.models as model
import voyager.api_models.default as modef
from voyager.db.enums import TripTypes, JoinRequestStatus, JoinRequestActions
from voyager.internal.exceptions import NotFound, Forbidden, Conflict, InvalidOperation
from .trips import TripDirectory
from .group_chat import GroupChatSync
from .timedates import get_utc_now

log = logging.getLogger(__name__)


def join_request_to_model(request: model.TripsJoinRequests) -> modef.JoinRequest:
  return modef.JoinRequest(
    request_id=request.id,
    trip_id=request.id_trip,
    trip_creator_username=request.trip_creator_username,
    requester_username=request.requester_username,
    message=request.message or '',
    status=request.status.value,
    created_at=request.created_at,
    responder_username=request.responder_username,
    responded_at=request.responded_at
  )


class JoinRequestWorkflow:
  """
  The join request state machine. A request starts pending and moves exactly once, to
  approved or rejected. Only the trip creator may list or resolve requests of a trip.

  The one-pending-per-requester rule and the pending-only transition are both enforced
  by the store (a partial unique index and a conditional UPDATE), so two concurrent
  callers can never both win.
  """

  def __init__(self, db: Session, trips: TripDirectory, chat_sync: GroupChatSync):
    self.db = db
    self.trips = trips
    self.chat_sync = chat_sync

  def create(self, trip_id: int, requester_username: str, message: str = '') -> model.TripsJoinRequests:
    trip = self.trips.require(trip_id)

    if trip.type != TripTypes.group:
      raise InvalidOperation("Only group trips accept join requests")

    if requester_username == trip.creator_username:
      raise InvalidOperation("You cannot request to join your own trip")

    existing_request = self.db.query(model.TripsJoinRequests).filter(
      model.TripsJoinRequests.id_trip == trip_id,
      model.TripsJoinRequests.requester_username == requester_username,
      model.TripsJoinRequests.status == JoinRequestStatus.pending
    ).first()
    if existing_request:
      raise Conflict("You already have a pending request for this trip")

    join_request = model.TripsJoinRequests(
      id_trip=trip.id,
      trip_creator_username=trip.creator_username,
      requester_username=requester_username,
      message=message or '',
      status=JoinRequestStatus.pending,
      created_at=get_utc_now()
    )

    try:
      self.db.add(join_request)
      self.db.commit()
    except IntegrityError:
      self.db.rollback()
      log.warning(f"Concurrent pending request from {requester_username} for trip {trip_id} rejected by the store")
      raise Conflict("You already have a pending request for this trip")

    log.info(f"Join request {join_request.id} created by {requester_username} for trip {trip_id}")
    return join_request

  def list_requests(self, trip_id: int, caller_username: str) -> list[model.TripsJoinRequests]:
    trip = self.trips.require(trip_id)

    if caller_username != trip.creator_username:
      raise Forbidden("Only the trip creator can view its join requests")

    return self.db.query(model.TripsJoinRequests).filter(
      model.TripsJoinRequests.id_trip == trip_id
    ).order_by(model.TripsJoinRequests.created_at.desc(), model.TripsJoinRequests.id.desc()).all()

  def respond(self, trip_id: int, request_id: int, action: str,
              responder_username: str) -> tuple[model.TripsJoinRequests, bool]:
    """
    Resolves a pending request. An approval and the requester's trip membership commit
    together. Returns the updated request and whether the follow-up chat sync succeeded.
    A failed chat sync never undoes the approval, the next on_approval or get_group_chat
    for the trip repairs it.
    """
    trip = self.trips.require(trip_id)

    if responder_username != trip.creator_username:
      raise Forbidden("Only the trip creator can respond to join requests")

    join_request = self.db.get(model.TripsJoinRequests, request_id)
    if not join_request or join_request.id_trip != trip_id:
      raise NotFound(f"Join request {request_id} not found for trip {trip_id}")

    if join_request.status != JoinRequestStatus.pending:
      raise Conflict(f"Join request already {join_request.status.value}")

    try:
      parsed_action = JoinRequestActions(action.lower())
    except ValueError:
      raise InvalidOperation(f"Unknown action '{action}', expected 'approve' or 'reject'")

    new_status = JoinRequestStatus.approved if parsed_action == JoinRequestActions.approve else JoinRequestStatus.rejected

    updated = self.db.query(model.TripsJoinRequests).filter(
      model.TripsJoinRequests.id == request_id,
      model.TripsJoinRequests.status == JoinRequestStatus.pending
    ).update({
      model.TripsJoinRequests.status: new_status,
      model.TripsJoinRequests.responder_username: responder_username,
      model.TripsJoinRequests.responded_at: get_utc_now()
    }, synchronize_session=False)

    if not updated:
      self.db.rollback()
      self.db.refresh(join_request)
      log.warning(f"Join request {request_id} was resolved concurrently, now {join_request.status.value}")
      raise Conflict(f"Join request already {join_request.status.value}")

    # Trip membership rides on the same commit as the approval
    if new_status == JoinRequestStatus.approved:
      self.trips.stage_participant(trip, join_request.requester_username)

    try:
      self.db.commit()
    except IntegrityError:
      self.db.rollback()
      log.warning(f"Participants of trip {trip_id} changed while approving request {request_id}")
      raise Conflict("Trip participants changed concurrently, try again")

    self.db.refresh(join_request)
    log.info(f"Join request {request_id} {new_status.value} by {responder_username}")

    if new_status != JoinRequestStatus.approved:
      return join_request, True

    try:
      self.chat_sync.on_approval(trip.id, trip.creator_username, join_request.requester_username)
    except Exception:
      self.db.rollback()
      log.exception(f"Chat sync failed after approving request {request_id}, left for reconciliation")
      return join_request, False

    return join_request, True
