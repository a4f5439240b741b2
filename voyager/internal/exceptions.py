from fastapi import HTTPException, status
from voyager.db.enums import ErrorCodes


class ServiceError(HTTPException):
  """Base for every failure the core reports. Carries a stable code next to the HTTP status."""
  code = ErrorCodes.internal
  status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

  def __init__(self, msg: str):
    super().__init__(status_code=type(self).status_code, detail=msg)
    self.msg = msg

  def to_dict(self) -> dict:
    return {"status": False, "code": self.code.value, "msg": self.msg}


class NotFound(ServiceError):
  code = ErrorCodes.not_found
  status_code = status.HTTP_404_NOT_FOUND

class Forbidden(ServiceError):
  code = ErrorCodes.forbidden
  status_code = status.HTTP_403_FORBIDDEN

class Conflict(ServiceError):
  code = ErrorCodes.conflict
  status_code = status.HTTP_409_CONFLICT

class InvalidOperation(ServiceError):
  code = ErrorCodes.invalid_operation
  status_code = status.HTTP_400_BAD_REQUEST

class InternalError(ServiceError):
  pass
