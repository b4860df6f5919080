"""Achievement model for tracking student achievements."""
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Achievement:
    id: int
    title: str
    activity_type: str
    student_id: str = ''
    student_name: str = ''
    verified: bool = False


@dataclass(frozen=True)
class FormDraft:
    """In-progress input of the submission form."""
    title: str = ''
    activity_type: str = ''
    student_id: str = ''
    student_name: str = ''

    @classmethod
    def from_form(cls, form):
        """Build a draft from request form data; missing fields become empty."""
        return cls(**{f.name: form.get(f.name, '') or '' for f in fields(cls)})

    def is_submittable(self):
        # Presence check only, values are not stripped.
        return bool(self.title) and bool(self.activity_type)

    def is_empty(self):
        return self == FormDraft()

    def to_achievement(self, achievement_id):
        return Achievement(
            id=achievement_id,
            title=self.title,
            activity_type=self.activity_type,
            student_id=self.student_id,
            student_name=self.student_name,
            verified=False,
        )
