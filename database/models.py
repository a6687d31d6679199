from sqlalchemy import Column, String, Text, DateTime, JSON
from sqlalchemy.ext.declarative import declarative_base
from datetime import datetime
import uuid

Base = declarative_base()


def generate_id() -> str:
    """Непрозрачный идентификатор записи"""
    return uuid.uuid4().hex


class Registration(Base):
    __tablename__ = "registrations"

    # Имена колонок совпадают с полями JSON запроса
    id = Column(String(32), primary_key=True, default=generate_id)
    event = Column(Text, nullable=False)
    team_name = Column("teamName", Text, nullable=False)
    team_leader = Column("teamLeader", Text, nullable=False)
    phone_no = Column("phoneNo", String(10), nullable=False)
    email = Column(Text, nullable=False)
    roll_no = Column("rollNo", Text, nullable=False)
    members = Column(JSON, nullable=False)  # Список имен участников
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
