import logging
from fastapi import APIRouter, Depends, HTTPException
import voyager.api_models.response as mores
import voyager.api_models.default as modef
from voyager.internal.dependencies import NotificationProjector, get_notification_projector
from voyager.internal.exceptions import InternalError

log = logging.getLogger(__name__)

router = APIRouter(prefix="/v2/notifications", tags=["notifications"])


@router.get("/{username}", response_model=mores.NotificationListResponse)
def get_notifications(username: str,
                            projector: NotificationProjector = Depends(get_notification_projector)):
  """Incoming join requests and resolved outgoing ones, newest first"""
  try:
    notifications = projector.get_notifications(username)

    return mores.NotificationListResponse(
      notifications=notifications,
      count=len(notifications)
    )

  except Exception as e:
    log.exception(f"Error retrieving notifications of {username}")
    raise InternalError(f"Error retrieving notifications: {str(e)}")


@router.get("/{username}/count", response_model=mores.NotificationCountResponse)
def get_notification_count(username: str,
                                 projector: NotificationProjector = Depends(get_notification_projector)):
  try:
    return mores.NotificationCountResponse(count=projector.count(username))

  except Exception as e:
    log.exception(f"Error counting notifications of {username}")
    raise InternalError(f"Error counting notifications: {str(e)}")


@router.delete("/{username}/{request_id}", response_model=modef.DefaultResponse,
               responses={404: {"model": modef.ErrorResponse}, 400: {"model": modef.ErrorResponse}})
def dismiss_notification(username: str, request_id: int,
                               projector: NotificationProjector = Depends(get_notification_projector)):
  """Permanently removes a resolved request from the requester's feed"""
  try:
    projector.dismiss(username, request_id)

    return modef.DefaultResponse(status=True, msg="Notification dismissed")

  except HTTPException:
    raise
  except Exception as e:
    log.exception(f"Error dismissing notification {request_id}")
    raise InternalError(f"Error dismissing notification: {str(e)}")
