import logging
from dataclasses import replace

from stutrack.models import FormDraft, Role

log = logging.getLogger(__name__)


class AchievementService:
    """Record lifecycle and view filtering. Every method is a pure function of its inputs."""

    @staticmethod
    def submit(state, draft=None):
        """
        Creates an achievement from the active draft.

        Args:
            state: The current AppState
            draft: Optional FormDraft that becomes the active draft first

        Returns:
            tuple: (new AppState, created Achievement or None if rejected)
        """
        if draft is not None:
            state = replace(state, draft=draft)

        if not state.draft.is_submittable():
            # Rejected silently; the typed values stay in the form.
            log.debug("Submission rejected, title or activity type is empty")
            return state, None

        achievement = state.draft.to_achievement(state.next_id)
        new_state = replace(
            state,
            achievements=state.achievements + (achievement,),
            draft=FormDraft(),
            next_id=state.next_id + 1,
        )
        log.info("Achievement %s created for student '%s'", achievement.id, achievement.student_id)
        return new_state, achievement

    @staticmethod
    def verify(state, achievement_id):
        """Marks the achievement as verified. Unknown or already verified ids return `state` as is."""
        target = AchievementService.find(state, achievement_id)
        if target is None:
            log.debug("Verify ignored, achievement %s not found", achievement_id)
            return state
        if target.verified:
            return state

        achievements = tuple(
            replace(a, verified=True) if a.id == achievement_id else a
            for a in state.achievements
        )
        log.info("Achievement %s verified", achievement_id)
        return replace(state, achievements=achievements)

    @staticmethod
    def delete_record(state, achievement_id):
        """Removes the achievement. Unknown ids return `state` as is."""
        if AchievementService.find(state, achievement_id) is None:
            log.debug("Delete ignored, achievement %s not found", achievement_id)
            return state

        achievements = tuple(a for a in state.achievements if a.id != achievement_id)
        log.info("Achievement %s deleted", achievement_id)
        return replace(state, achievements=achievements)

    @staticmethod
    def find(state, achievement_id):
        return next((a for a in state.achievements if a.id == achievement_id), None)

    @staticmethod
    def student_view(achievements, student_id, role):
        """
        Records shown under "My Achievements".

        Admins see every record. Students only see records whose student ID
        equals the one currently typed into the form.
        """
        if role == Role.ADMIN:
            return list(achievements)
        return [a for a in achievements if a.student_id == student_id]

    @staticmethod
    def student_view_for(state):
        return AchievementService.student_view(state.achievements, state.draft.student_id, state.role)

    @staticmethod
    def pending_view(achievements):
        """Unverified records, in the order they were submitted."""
        return [a for a in achievements if not a.verified]

    @staticmethod
    def set_role(state, role):
        role = Role(role)
        if role == state.role:
            return state
        log.info("Role switched to %s", role.value)
        return replace(state, role=role)

    @staticmethod
    def update_draft(state, draft):
        return replace(state, draft=draft)

    @staticmethod
    def reset_draft(state):
        if state.draft.is_empty():
            return state
        return replace(state, draft=FormDraft())
