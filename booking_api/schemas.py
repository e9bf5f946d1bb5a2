# booking_api/schemas.py

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str
    password: str = Field(min_length=6, max_length=72)
    provider: bool = False


class UserPublic(BaseModel):
    id: int
    name: str
    email: str
    provider: bool


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserPublic


class FilePublic(BaseModel):
    id: int
    path: str
    url: str


class ProviderPublic(BaseModel):
    id: int
    name: str
    avatar: Optional[FilePublic] = None


class RequesterPublic(BaseModel):
    id: int
    name: str


class AppointmentCreate(BaseModel):
    provider_id: int
    date: datetime


class AppointmentPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: datetime
    requester_id: int
    provider_id: int
    canceled_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class AppointmentListItem(BaseModel):
    id: int
    date: datetime
    past: bool
    cancelable: bool
    provider: ProviderPublic


class ScheduleItem(BaseModel):
    id: int
    date: datetime
    requester: RequesterPublic


class AvailableSlot(BaseModel):
    time: str
    value: datetime
    available: bool


class NotificationPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    read: bool
    created_at: datetime


class PartyContact(BaseModel):
    name: str
    email: Optional[str] = None


class CancellationMailPayload(BaseModel):
    """Snapshot handed to the worker; never read back by the API."""

    model_config = ConfigDict(frozen=True)

    appointment_id: int
    requester_id: int
    provider_id: int
    date: datetime
    canceled_at: datetime
    created_at: datetime
    updated_at: datetime
    provider: PartyContact
    requester: PartyContact
