from datetime import datetime, timedelta

import pytest

import voyager.db.models as model
from voyager.db.enums import ErrorCodes, NotificationKinds
from voyager.internal.exceptions import ServiceError


def set_times(db, request_id, created_at=None, responded_at=None):
  request = db.get(model.TripsJoinRequests, request_id)
  if created_at:
    request.created_at = created_at
  request.responded_at = responded_at
  db.commit()


def test_creator_sees_incoming_pending_requests(workflow, projector, group_trip):
  workflow.create(group_trip.id, "rita", "I have a car")

  notifications = projector.get_notifications("carol")

  assert len(notifications) == 1
  incoming = notifications[0]
  assert incoming.kind == NotificationKinds.join_request.value
  assert incoming.trip_id == group_trip.id
  assert incoming.trip_title == "Alps Roadtrip"
  assert incoming.trip_route == "Vienna → Innsbruck"
  assert incoming.requester_username == "rita"
  assert incoming.message == "I have a car"


def test_pending_request_is_not_in_requesters_feed(workflow, projector, group_trip):
  workflow.create(group_trip.id, "rita")
  assert projector.get_notifications("rita") == []
  assert projector.count("rita") == 0


def test_incoming_leaves_feed_once_responded(workflow, projector, group_trip):
  join_request = workflow.create(group_trip.id, "rita")
  workflow.respond(group_trip.id, join_request.id, "reject", "carol")

  assert projector.get_notifications("carol") == []


def test_requester_sees_resolutions(workflow, projector, group_trip):
  approved = workflow.create(group_trip.id, "rita")
  workflow.respond(group_trip.id, approved.id, "approve", "carol")
  rejected = workflow.create(group_trip.id, "ron")
  workflow.respond(group_trip.id, rejected.id, "reject", "carol")

  rita_feed = projector.get_notifications("rita")
  assert [n.kind for n in rita_feed] == [NotificationKinds.request_approved.value]
  assert "Alps Roadtrip" in rita_feed[0].message
  assert rita_feed[0].responder_username == "carol"
  assert rita_feed[0].timestamp == approved.responded_at

  ron_feed = projector.get_notifications("ron")
  assert [n.kind for n in ron_feed] == [NotificationKinds.request_rejected.value]
  assert "Alps Roadtrip" in ron_feed[0].message


def test_resolution_falls_back_to_created_at(db, workflow, projector, group_trip):
  join_request = workflow.create(group_trip.id, "rita")
  workflow.respond(group_trip.id, join_request.id, "approve", "carol")
  set_times(db, join_request.id, responded_at=None)

  feed = projector.get_notifications("rita")
  assert feed[0].timestamp == join_request.created_at


def test_feed_is_newest_first_with_id_tiebreak(db, workflow, trips, projector, group_trip):
  # carol both creates a trip and requests to join dave's
  daves_trip = trips.create(title="Coast", creator_username="dave", trip_type="group")
  base = datetime(2025, 6, 1, 12, 0, 0)

  older = workflow.create(group_trip.id, "rita")
  tied_a = workflow.create(group_trip.id, "ron")
  tied_b = workflow.create(group_trip.id, "pia")
  resolved = workflow.create(daves_trip.id, "carol")
  workflow.respond(daves_trip.id, resolved.id, "approve", "dave")

  set_times(db, older.id, created_at=base)
  set_times(db, tied_a.id, created_at=base + timedelta(hours=1))
  set_times(db, tied_b.id, created_at=base + timedelta(hours=1))
  set_times(db, resolved.id, created_at=base - timedelta(days=1), responded_at=base + timedelta(hours=2))

  feed = projector.get_notifications("carol")

  assert [n.notification_id for n in feed] == [resolved.id, tied_b.id, tied_a.id, older.id]
  assert feed[0].kind == NotificationKinds.request_approved.value


def test_incoming_uses_creator_snapshot(db, workflow, projector, group_trip):
  workflow.create(group_trip.id, "rita")

  # Ownership moving later does not move notifications already raised
  group_trip.creator_username = "zoe"
  db.commit()

  assert len(projector.get_notifications("carol")) == 1
  assert projector.get_notifications("zoe") == []


def test_count_matches_feed_length(workflow, trips, projector, group_trip):
  daves_trip = trips.create(title="Coast", creator_username="dave", trip_type="group")
  workflow.create(group_trip.id, "rita")
  workflow.create(group_trip.id, "ron")
  mine = workflow.create(daves_trip.id, "carol")
  workflow.respond(daves_trip.id, mine.id, "reject", "dave")

  for username in ["carol", "dave", "rita", "ron", "nobody"]:
    assert projector.count(username) == len(projector.get_notifications(username))
  assert projector.count("carol") == 3


def test_dismiss_resolved_removes_it_permanently(db, workflow, projector, group_trip):
  join_request = workflow.create(group_trip.id, "rita")
  workflow.respond(group_trip.id, join_request.id, "approve", "carol")
  assert projector.count("rita") == 1

  projector.dismiss("rita", join_request.id)

  assert projector.get_notifications("rita") == []
  assert projector.count("rita") == 0
  assert db.get(model.TripsJoinRequests, join_request.id) is None


def test_dismiss_pending_is_invalid(workflow, projector, group_trip):
  join_request = workflow.create(group_trip.id, "rita")

  with pytest.raises(ServiceError) as excinfo:
    projector.dismiss("rita", join_request.id)
  assert excinfo.value.code == ErrorCodes.invalid_operation
  assert projector.count("carol") == 1


def test_dismiss_someone_elses_request_is_not_found(workflow, projector, group_trip):
  join_request = workflow.create(group_trip.id, "rita")
  workflow.respond(group_trip.id, join_request.id, "reject", "carol")

  with pytest.raises(ServiceError) as excinfo:
    projector.dismiss("carol", join_request.id)
  assert excinfo.value.code == ErrorCodes.not_found
  assert projector.count("rita") == 1


def test_dismiss_twice_is_not_found(workflow, projector, group_trip):
  join_request = workflow.create(group_trip.id, "rita")
  workflow.respond(group_trip.id, join_request.id, "reject", "carol")
  projector.dismiss("rita", join_request.id)

  with pytest.raises(ServiceError) as excinfo:
    projector.dismiss("rita", join_request.id)
  assert excinfo.value.code == ErrorCodes.not_found
