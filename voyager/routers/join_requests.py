import logging
from fastapi import APIRouter, Depends, HTTPException, status
import voyager.api_models.request as moreq
import voyager.api_models.response as mores
import voyager.api_models.default as modef
from voyager.internal.dependencies import JoinRequestWorkflow, get_join_workflow, join_request_to_model
from voyager.internal.exceptions import InternalError

log = logging.getLogger(__name__)

router = APIRouter(prefix="/v2/trip", tags=["join requests"])


@router.post("/{trip_id}/join-requests", response_model=mores.JoinRequestCreated,
             status_code=status.HTTP_201_CREATED,
             responses={404: {"model": modef.ErrorResponse}, 400: {"model": modef.ErrorResponse},
                        409: {"model": modef.ErrorResponse}})
def create_join_request(trip_id: int, request: moreq.TripJoinRequest,
                              workflow: JoinRequestWorkflow = Depends(get_join_workflow)):
  """Request to join a group trip"""
  try:
    join_request = workflow.create(trip_id, request.requester_username, request.message)

    return mores.JoinRequestCreated(status=True, msg="Join request sent successfully", request_id=join_request.id)

  except HTTPException:
    raise
  except Exception as e:
    log.exception(f"Error sending join request for trip {trip_id}")
    raise InternalError(f"Error sending join request: {str(e)}")


@router.get("/{trip_id}/join-requests", response_model=mores.JoinRequestListResponse,
            responses={404: {"model": modef.ErrorResponse}, 403: {"model": modef.ErrorResponse}})
def list_join_requests(trip_id: int, username: str,
                             workflow: JoinRequestWorkflow = Depends(get_join_workflow)):
  """Every join request of a trip, newest first. Only the trip creator may look."""
  try:
    join_requests = workflow.list_requests(trip_id, username)

    return mores.JoinRequestListResponse(
      join_requests=[join_request_to_model(r) for r in join_requests]
    )

  except HTTPException:
    raise
  except Exception as e:
    log.exception(f"Error retrieving join requests for trip {trip_id}")
    raise InternalError(f"Error retrieving join requests: {str(e)}")


@router.post("/{trip_id}/join-requests/{request_id}/respond", response_model=mores.JoinRequestResolved,
             responses={404: {"model": modef.ErrorResponse}, 403: {"model": modef.ErrorResponse},
                        409: {"model": modef.ErrorResponse}, 400: {"model": modef.ErrorResponse}})
def respond_join_request(trip_id: int, request_id: int, request: moreq.TripJoinResponse,
                               workflow: JoinRequestWorkflow = Depends(get_join_workflow)):
  """Approve or reject a pending join request"""
  try:
    join_request, chat_synced = workflow.respond(trip_id, request_id, request.action, request.responder_username)

    status_msg = f"Join request {join_request.status.value}"
    return mores.JoinRequestResolved(
      status=True,
      msg=status_msg,
      request=join_request_to_model(join_request),
      chat_synced=chat_synced
    )

  except HTTPException:
    raise
  except Exception as e:
    log.exception(f"Error processing join request {request_id}")
    raise InternalError(f"Error processing join request: {str(e)}")
