import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
)

from db import Base
from enums import ProjectStatus, ProjectPriority


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


def _enum_column(enum_cls, default):
    return Column(
        Enum(enum_cls, values_callable=lambda e: [m.value for m in e], native_enum=False, length=20),
        nullable=False,
        default=default,
        index=True,
    )


# -------- Users --------
class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    hashed_password = Column(String(128), nullable=False)
    disabled = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)

    def __str__(self) -> str:
        return f"{self.name} ({self.email})"


# -------- Projects --------
class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text)
    status = _enum_column(ProjectStatus, ProjectStatus.CONCEPT)
    priority = _enum_column(ProjectPriority, ProjectPriority.NORMAAL)
    budget = Column(Float)
    start_date = Column(Date)
    end_date = Column(Date)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now, index=True)

    def __str__(self) -> str:
        return self.name
