"""Pydantic schemas for Notification model."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import ConfigDict

from flatscout.schemas.common import CamelModel, Pagination


class NotificationRead(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    type: str
    title: str
    message: str
    data: dict[str, Any] = {}
    read: bool
    read_at: datetime | None = None
    priority: str
    action_url: str | None = None
    action_text: str | None = None
    expires_at: datetime | None = None
    sent_via: list[str] = []
    created_at: datetime


class NotificationPage(CamelModel):
    notifications: list[NotificationRead]
    pagination: Pagination
    unread_count: int


class MarkAllReadResult(CamelModel):
    updated_count: int
