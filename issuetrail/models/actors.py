"""Value objects supplied by the user and action-plan collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class User:
    """A user as resolved by the session collaborator.

    ``login`` is the identity key; ``name`` is what change history displays.
    """

    login: str | None
    name: str | None = None


@dataclass(frozen=True)
class ActionPlan:
    """An action plan issues can be attached to."""

    key: str | None
    name: str | None = None

    @classmethod
    def create(cls, name: str) -> ActionPlan:
        return cls(key=str(uuid4()), name=name)
