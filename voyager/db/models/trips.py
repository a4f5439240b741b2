from sqlalchemy import Column, Integer, String, Text, Enum, TIMESTAMP, ForeignKey, Index, UniqueConstraint, text
from sqlalchemy.orm import relationship
from ..database import Base
from ..enums import TripTypes, JoinRequestStatus


def format_route(origin, destination):
	if origin and destination:
		return f"{origin} → {destination}"
	return destination or origin


class Trips(Base):
	__tablename__ = 'trips'

	id = Column(Integer, primary_key=True)
	title = Column(String(128), nullable=False)
	origin = Column(String(255))
	destination = Column(String(255))
	type = Column(Enum(TripTypes), default=TripTypes.solo, nullable=False)
	creator_username = Column(String(64), nullable=False, index=True)
	created_at = Column(TIMESTAMP, nullable=False)

	participants = relationship('TripsParticipants', back_populates='trip', cascade='all, delete-orphan')
	requests = relationship('TripsJoinRequests', back_populates='trip')

	@property
	def route(self):
		return format_route(self.origin, self.destination)

class TripsParticipants(Base):
	__tablename__ = 'trips_participants'

	id = Column(Integer, primary_key=True)
	id_trip = Column(Integer, ForeignKey('trips.id'), nullable=False)
	username = Column(String(64), nullable=False)

	trip = relationship('Trips', back_populates='participants')

	__table_args__ = (
		UniqueConstraint('id_trip', 'username', name='trips_participants_unique'),
	)

class TripsJoinRequests(Base):
	__tablename__ = 'trips_join_requests'

	id = Column(Integer, primary_key=True)
	id_trip = Column(Integer, ForeignKey('trips.id'), nullable=False, index=True)
	trip_creator_username = Column(String(64), nullable=False, index=True)
	requester_username = Column(String(64), nullable=False, index=True)
	message = Column(Text, default='', nullable=False)
	status = Column(Enum(JoinRequestStatus), default=JoinRequestStatus.pending, nullable=False)
	created_at = Column(TIMESTAMP, nullable=False)
	responder_username = Column(String(64))
	responded_at = Column(TIMESTAMP)

	trip = relationship('Trips', back_populates='requests')

	__table_args__ = (
		# One pending request per (trip, requester), enforced by the store itself
		Index(
			'trips_join_requests_one_pending',
			'id_trip', 'requester_username',
			unique=True,
			sqlite_where=text("status = 'pending'"),
			postgresql_where=text("status = 'pending'"),
		),
	)
