"""Application state of one workspace."""
from dataclasses import dataclass, field
from enum import Enum

from .achievement import FormDraft


class Role(str, Enum):
    STUDENT = 'student'
    ADMIN = 'admin'

    @property
    def label(self):
        return self.value.capitalize()


@dataclass(frozen=True)
class AppState:
    """
    The records, the current role and the form draft of a workspace.

    Instances are never mutated; AchievementService returns a new state for
    every transition. ``next_id`` only grows, so ids are never reused even
    after a record is deleted.
    """
    achievements: tuple = ()
    role: Role = Role.STUDENT
    draft: FormDraft = field(default_factory=FormDraft)
    next_id: int = 1
