import logging
from sqlalchemy import func
from sqlalchemy.orm import Session
import voyager.db.models as model
import voyager.api_models.default as modef
from voyager.db.enums import JoinRequestStatus, NotificationKinds
from voyager.internal.exceptions import NotFound, InvalidOperation

log = logging.getLogger(__name__)

RESOLVED_STATUSES = [JoinRequestStatus.approved, JoinRequestStatus.rejected]


def resolution_message(status: JoinRequestStatus, trip_title: str | None) -> str:
    title = trip_title or "a trip"
    if status == JoinRequestStatus.approved:
        return f"Your request to join \"{title}\" was approved. Say hi in the group chat!"
    return f"Your request to join \"{title}\" was declined."


class NotificationProjector:
    """
    Builds a user's notification feed from join requests, nothing is stored per notification.

    Incoming: pending requests on trips the user created (matched on the creator snapshot
    taken when the request was made). Outgoing: the user's own requests once resolved.
    """

    def __init__(self, db: Session):
        self.db = db

    def _incoming_query(self, username: str):
        return self.db.query(model.TripsJoinRequests).filter(
            model.TripsJoinRequests.trip_creator_username == username,
            model.TripsJoinRequests.status == JoinRequestStatus.pending
        )

    def _outgoing_query(self, username: str):
        return self.db.query(model.TripsJoinRequests).filter(
            model.TripsJoinRequests.requester_username == username,
            model.TripsJoinRequests.status.in_(RESOLVED_STATUSES)
        )

    def get_notifications(self, username: str) -> list[modef.Notification]:
        notifications = []

        incoming = self._incoming_query(username).add_columns(
            model.Trips.title, model.Trips.origin, model.Trips.destination
        ).outerjoin(model.Trips, model.Trips.id == model.TripsJoinRequests.id_trip).all()

        for request, title, origin, destination in incoming:
            notifications.append(modef.Notification(
                notification_id=request.id,
                kind=NotificationKinds.join_request.value,
                trip_id=request.id_trip,
                trip_title=title,
                trip_route=model.format_route(origin, destination),
                requester_username=request.requester_username,
                message=request.message or '',
                timestamp=request.created_at
            ))

        outgoing = self._outgoing_query(username).add_columns(
            model.Trips.title, model.Trips.origin, model.Trips.destination
        ).outerjoin(model.Trips, model.Trips.id == model.TripsJoinRequests.id_trip).all()

        for request, title, origin, destination in outgoing:
            if request.status == JoinRequestStatus.approved:
                kind = NotificationKinds.request_approved
            else:
                kind = NotificationKinds.request_rejected

            notifications.append(modef.Notification(
                notification_id=request.id,
                kind=kind.value,
                trip_id=request.id_trip,
                trip_title=title,
                trip_route=model.format_route(origin, destination),
                requester_username=request.requester_username,
                responder_username=request.responder_username,
                message=resolution_message(request.status, title),
                timestamp=request.responded_at or request.created_at
            ))

        # Newest first, request id keeps ties stable
        notifications.sort(key=lambda n: (n.timestamp, n.notification_id), reverse=True)
        return notifications

    def count(self, username: str) -> int:
        incoming = self._incoming_query(username).with_entities(func.count(model.TripsJoinRequests.id)).scalar()
        outgoing = self._outgoing_query(username).with_entities(func.count(model.TripsJoinRequests.id)).scalar()
        return incoming + outgoing

    def dismiss(self, username: str, request_id: int):
        """Deletes a resolved request of username. Pending requests can not be dismissed."""
        deleted = self.db.query(model.TripsJoinRequests).filter(
            model.TripsJoinRequests.id == request_id,
            model.TripsJoinRequests.requester_username == username,
            model.TripsJoinRequests.status.in_(RESOLVED_STATUSES)
        ).delete(synchronize_session="fetch")
        self.db.commit()

        if deleted:
            log.info(f"Notification {request_id} dismissed by {username}")
            return

        request = self.db.get(model.TripsJoinRequests, request_id)
        if not request or request.requester_username != username:
            raise NotFound(f"Notification {request_id} not found")

        if request.status == JoinRequestStatus.pending:
            raise InvalidOperation("Pending requests cannot be dismissed")

        # Resolved and owned but nothing deleted, a concurrent dismiss got there first
        raise NotFound(f"Notification {request_id} not found")
