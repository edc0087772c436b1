from __future__ import annotations

from decimal import Decimal
from typing import Union

from pydantic import BaseModel, Field

from .models import Item, User


class ItemSchema(BaseModel):
    id: Union[int, str]
    name: str
    value: Union[int, float, Decimal]
    priority: bool | None = None

    def to_item(self) -> Item:
        return Item(id=self.id, name=self.name, value=self.value, priority=self.priority)


class UserSchema(BaseModel):
    name: str
    role: str

    def to_user(self) -> User:
        return User(name=self.name, role=self.role)


class ReportRequest(BaseModel):
    """Report request payload as read from JSON.

    `report_type` and `user.role` stay plain strings so that unknown values
    reach the registries and fail there with UnknownStrategyKeyError.
    """

    report_type: str
    user: UserSchema
    items: list[ItemSchema] = Field(default_factory=list)

    def to_items(self) -> list[Item]:
        return [i.to_item() for i in self.items]
