"""Operator-facing notices (the register's toasts).

Use cases post notices instead of raising for outcomes the operator must
see but that do not abort the workflow: "Added X to cart", an invalid
discount, a rejected checkout, a sale whose recording failed. The caller
drains the board after each use case and shows the notices.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NoticeVariant(Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notice:
    title: str
    description: str = ""
    variant: NoticeVariant = NoticeVariant.DEFAULT

    @property
    def is_error(self) -> bool:
        return self.variant is NoticeVariant.DESTRUCTIVE


class NoticeBoard:

    def __init__(self) -> None:
        self._notices: list[Notice] = []

    def info(self, title: str, description: str = "") -> None:
        self._notices.append(Notice(title, description))

    def error(self, title: str, description: str = "") -> None:
        self._notices.append(Notice(title, description, NoticeVariant.DESTRUCTIVE))

    @property
    def notices(self) -> list[Notice]:
        return list(self._notices)

    def drain(self) -> list[Notice]:
        """Return and forget every posted notice."""
        notices, self._notices = self._notices, []
        return notices
