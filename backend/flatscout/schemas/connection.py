"""Pydantic schemas for connection requests."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import ConfigDict

from flatscout.schemas.common import CamelModel
from flatscout.schemas.user import UserSummary

ConnectionStatusValue = Literal["connected", "request_sent", "request_received", "not_connected"]


class ConnectionRequestCreate(CamelModel):
    to_user_id: UUID


class ConnectionRequestRead(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    from_user_id: UUID
    to_user_id: UUID
    status: str
    created_at: datetime
    responded_at: datetime | None = None


class PendingRequest(ConnectionRequestRead):
    from_user: UserSummary


class ConnectionStatus(CamelModel):
    status: ConnectionStatusValue
