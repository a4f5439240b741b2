import logging
from fastapi import APIRouter, Depends, HTTPException, status
import voyager.api_models.request as moreq
import voyager.api_models.response as mores
import voyager.api_models.default as modef
from voyager.internal.dependencies import TripDirectory, get_trip_directory, trip_to_model
from voyager.internal.exceptions import InternalError

log = logging.getLogger(__name__)

router = APIRouter(prefix="/v2/trip", tags=["trip"])


@router.post("", response_model=mores.TripCreated, status_code=status.HTTP_201_CREATED,
             responses={400: {"model": modef.ErrorResponse}})
def create_trip(request: moreq.TripCreate, trips: TripDirectory = Depends(get_trip_directory)):
  """Propose a new solo or group trip"""
  try:
    trip = trips.create(
      title=request.title,
      creator_username=request.creator_username,
      trip_type=request.type,
      origin=request.origin,
      destination=request.destination,
      participants=request.participants
    )
    return mores.TripCreated(status=True, msg="Trip created", trip_id=trip.id)

  except HTTPException:
    raise
  except Exception as e:
    log.exception("Error creating trip")
    raise InternalError(f"Error creating trip: {str(e)}")


@router.get("/created/{username}", response_model=mores.TripList)
def get_created_trips(username: str, trips: TripDirectory = Depends(get_trip_directory)):
  """Trips proposed by a user"""
  try:
    return mores.TripList(trips=[trip_to_model(t) for t in trips.list_by_creator(username)])

  except Exception as e:
    log.exception(f"Error retrieving trips of {username}")
    raise InternalError(f"Error retrieving trips: {str(e)}")


@router.get("/{trip_id}", response_model=modef.Trip, responses={404: {"model": modef.ErrorResponse}})
def get_trip(trip_id: int, trips: TripDirectory = Depends(get_trip_directory)):
  try:
    return trip_to_model(trips.require(trip_id))

  except HTTPException:
    raise
  except Exception as e:
    log.exception(f"Error retrieving trip {trip_id}")
    raise InternalError(f"Error retrieving trip: {str(e)}")
