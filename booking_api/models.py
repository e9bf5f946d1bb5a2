# booking_api/models.py

from typing import Optional
from datetime import datetime

from sqlalchemy import Column, DateTime, Index, text
from sqlmodel import SQLModel, Field, Relationship

from .config import FILES_BASE_URL
from .core import utcnow


# All instants are naive UTC; the column type must not demand tzinfo.
def naive_datetime_column(nullable: bool = False) -> Column:
    return Column(DateTime(timezone=False), nullable=nullable)


class File(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    path: str = Field(unique=True)
    created_at: datetime = Field(default_factory=utcnow, sa_column=naive_datetime_column())

    @property
    def url(self) -> str:
        return f"{FILES_BASE_URL}/files/{self.path}"


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    password_hash: str
    provider: bool = Field(default=False, index=True)
    avatar_id: Optional[int] = Field(default=None, foreign_key="file.id")
    created_at: datetime = Field(default_factory=utcnow, sa_column=naive_datetime_column())

    avatar: Optional[File] = Relationship()


class Appointment(SQLModel, table=True):
    # one active booking per provider and hour; canceled rows free the slot
    __table_args__ = (
        Index(
            "uq_provider_active_slot",
            "provider_id",
            "date",
            unique=True,
            sqlite_where=text("canceled_at IS NULL"),
            postgresql_where=text("canceled_at IS NULL"),
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    date: datetime = Field(sa_column=naive_datetime_column())
    requester_id: int = Field(foreign_key="user.id", index=True)
    provider_id: int = Field(foreign_key="user.id", index=True)
    canceled_at: Optional[datetime] = Field(default=None, sa_column=naive_datetime_column(nullable=True))
    created_at: datetime = Field(default_factory=utcnow, sa_column=naive_datetime_column())
    updated_at: datetime = Field(default_factory=utcnow, sa_column=naive_datetime_column())

    requester: Optional[User] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "[Appointment.requester_id]"}
    )
    provider: Optional[User] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "[Appointment.provider_id]"}
    )


class Notification(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    content: str
    recipient_id: int = Field(foreign_key="user.id", index=True)
    read: bool = False
    created_at: datetime = Field(default_factory=utcnow, sa_column=naive_datetime_column())
