from sqlalchemy import Column, Integer, String, Text, TIMESTAMP
from sqlalchemy import func
from ..database import Base

class Users(Base):
	__tablename__ = 'users'

	id = Column(Integer, primary_key=True)
	username = Column(String(64), unique=True, nullable=False)
	email = Column(String(128), unique=True, nullable=False)
	display_name = Column(String(128))
	bio = Column(Text)
	profile_picture_path = Column(String(255))
	cover_photo_path = Column(String(255))
	created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)
