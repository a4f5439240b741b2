import logging
from sqlalchemy.orm import Session
import voyager.db.models as model
import voyager.api_models.default as modef
from voyager.db.enums import TripTypes
from voyager.internal.exceptions import NotFound, InvalidOperation
from .timedates import get_utc_now

log = logging.getLogger(__name__)


def trip_to_model(trip: model.Trips) -> modef.Trip:
  return modef.Trip(
    trip_id=trip.id,
    title=trip.title,
    origin=trip.origin,
    destination=trip.destination,
    route=trip.route,
    type=trip.type.value,
    creator_username=trip.creator_username,
    participants=[p.username for p in trip.participants],
    created_at=trip.created_at
  )


class TripDirectory:
  """Keyed lookup, creator scan and membership writes over the trips table."""

  def __init__(self, db: Session):
    self.db = db

  def get(self, trip_id: int) -> model.Trips | None:
    return self.db.get(model.Trips, trip_id)

  def require(self, trip_id: int) -> model.Trips:
    trip = self.get(trip_id)
    if not trip:
      raise NotFound(f"Trip {trip_id} not found")
    return trip

  def list_by_creator(self, username: str) -> list[model.Trips]:
    return self.db.query(model.Trips).filter(
      model.Trips.creator_username == username
    ).order_by(model.Trips.created_at.desc(), model.Trips.id.desc()).all()

  def create(self, title: str, creator_username: str, trip_type: str = 'solo',
             origin: str | None = None, destination: str | None = None,
             participants: list[str] | None = None) -> model.Trips:
    try:
      parsed_type = TripTypes(trip_type.lower())
    except ValueError:
      raise InvalidOperation(f"Unknown trip type '{trip_type}'")

    participants = list(dict.fromkeys(participants or []))
    if parsed_type == TripTypes.solo and participants:
      raise InvalidOperation("Solo trips cannot have participants")

    trip = model.Trips(
      title=title,
      origin=origin,
      destination=destination,
      type=parsed_type,
      creator_username=creator_username,
      created_at=get_utc_now()
    )
    trip.participants = [model.TripsParticipants(username=username) for username in participants]

    self.db.add(trip)
    self.db.commit()
    log.info(f"Trip {trip.id} ({parsed_type.value}) created by {creator_username}")
    return trip

  def stage_participant(self, trip: model.Trips, username: str) -> bool:
    """
    Adds username to the trip's participant set without committing, so the caller's
    commit carries it. Returns False when already a member.
    """
    exists = self.db.query(model.TripsParticipants).filter(
      model.TripsParticipants.id_trip == trip.id,
      model.TripsParticipants.username == username
    ).first()
    if exists:
      return False

    trip.participants.append(model.TripsParticipants(username=username))
    return True
