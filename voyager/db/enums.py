# enums.py
from enum import Enum

class TripTypes(Enum):
	solo = 'solo'
	group = 'group'

class JoinRequestStatus(Enum):
	pending = 'pending'
	approved = 'approved'
	rejected = 'rejected'

class JoinRequestActions(Enum):
	approve = 'approve'
	reject = 'reject'

class NotificationKinds(Enum):
	join_request = 'JOIN_REQUEST'
	request_approved = 'REQUEST_APPROVED'
	request_rejected = 'REQUEST_REJECTED'

class ErrorCodes(Enum):
	not_found = 'NOT_FOUND'
	forbidden = 'FORBIDDEN'
	conflict = 'CONFLICT'
	invalid_operation = 'INVALID_OPERATION'
	internal = 'INTERNAL'
