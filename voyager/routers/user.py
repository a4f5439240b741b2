import logging
from fastapi import APIRouter, Depends, HTTPException, status
import voyager.api_models.request as moreq
import voyager.api_models.response as mores
from voyager.internal.dependencies import UserDirectory, get_user_directory
from voyager.internal.exceptions import InternalError

log = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["users"])


def user_to_response(user) -> mores.UserResponse:
  return mores.UserResponse(
    user_id=user.id,
    username=user.username,
    email=user.email,
    display_name=user.display_name,
    bio=user.bio,
    profile_picture_path=user.profile_picture_path,
    cover_photo_path=user.cover_photo_path
  )


@router.post("", response_model=mores.UserCreated, status_code=status.HTTP_201_CREATED)
def create_user(request: moreq.UserCreate, users: UserDirectory = Depends(get_user_directory)):
  try:
    user = users.create(request)
    return mores.UserCreated(status=True, msg="User created", user_id=user.id)

  except HTTPException:
    raise
  except Exception as e:
    log.exception("Error inserting user")
    raise InternalError(f"Failed to insert user: {str(e)}")


@router.get("", response_model=mores.UserResponse)
def get_user(identifier: str, users: UserDirectory = Depends(get_user_directory)):
  """Find a user by username or email"""
  try:
    return user_to_response(users.get(identifier))

  except HTTPException:
    raise
  except Exception as e:
    log.exception("Error finding user")
    raise InternalError(f"Error finding user: {str(e)}")


@router.put("/update", response_model=mores.UserResponse)
def update_user(request: moreq.UserEdit, users: UserDirectory = Depends(get_user_directory)):
  try:
    return user_to_response(users.update(request))

  except HTTPException:
    raise
  except Exception as e:
    log.exception("Error updating user")
    raise InternalError(f"Update failed: {str(e)}")
