import uuid
from sqlalchemy import Boolean, Column, Integer, Text, Uuid, false
from crime_intent.db.types import UTCDateTime
from .base import Base, now_utc


class Crime(Base):
    __tablename__ = 'crime'
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # Insertion order; assigned once when the row is created.
    position = Column(Integer, nullable=False, unique=True)
    title = Column(Text, nullable=False, default='', server_default='')
    date = Column(UTCDateTime(), nullable=False, default=now_utc)
    is_solved = Column(Boolean, nullable=False, default=False, server_default=false())
    # Added in schema version 2; older rows are backfilled with ''.
    suspect = Column(Text, nullable=False, default='', server_default='')

    def __repr__(self):
        return f"<Crime id={self.id} title={self.title!r} solved={self.is_solved}>"
