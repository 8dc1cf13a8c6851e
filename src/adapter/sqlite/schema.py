"""SQLAlchemy table definitions for the word store."""

from sqlalchemy import Column, Integer, Text, text
from sqlalchemy.orm import DeclarativeBase

from adapter.sqlite import WORDS_TABLE_NAME


class Base(DeclarativeBase):
    pass


class WordRow(Base):
    __tablename__ = WORDS_TABLE_NAME
    # AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    word = Column(Text, unique=True, nullable=False)
    definition = Column(Text, nullable=False)

    # Set by the engine at insert time, never by callers
    created_at = Column(Text, server_default=text("(STRFTIME('%Y-%m-%d %H:%M:%f', 'NOW'))"))
