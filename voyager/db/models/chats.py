from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from ..database import Base


class GroupChats(Base):
	__tablename__ = 'group_chats'

	id = Column(Integer, primary_key=True)
	id_trip = Column(Integer, ForeignKey('trips.id'), unique=True, nullable=False)
	creator_username = Column(String(64), nullable=False)
	created_at = Column(TIMESTAMP, nullable=False)

	participants = relationship('GroupChatsParticipants', back_populates='chat',
	                            order_by='GroupChatsParticipants.id')
	messages = relationship('GroupChatsMessages', back_populates='chat',
	                        order_by='GroupChatsMessages.id')

class GroupChatsParticipants(Base):
	__tablename__ = 'group_chats_participants'

	id = Column(Integer, primary_key=True)
	id_chat = Column(Integer, ForeignKey('group_chats.id'), nullable=False)
	username = Column(String(64), nullable=False, index=True)

	chat = relationship('GroupChats', back_populates='participants')

	__table_args__ = (
		UniqueConstraint('id_chat', 'username', name='group_chats_participants_unique'),
	)

class GroupChatsMessages(Base):
	__tablename__ = 'group_chats_messages'

	id = Column(Integer, primary_key=True)
	id_chat = Column(Integer, ForeignKey('group_chats.id'), nullable=False, index=True)
	sender = Column(String(64), nullable=False)
	content = Column(Text, nullable=False)
	sent_at = Column(TIMESTAMP, nullable=False)

	chat = relationship('GroupChats', back_populates='messages')
