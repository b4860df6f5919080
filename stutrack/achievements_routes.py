from flask import Blueprint, render_template, request, redirect, url_for, flash, send_file, current_app, abort
from .models import FormDraft, Role
from .services.achievement_service import AchievementService
from .services.export import AchievementExportService, ExportNotImplementedError
from .workspace import load_state, save_state, require_workspace

achievements_bp = Blueprint('achievements_bp', __name__)


def is_authorized(state, role):
    return state.role == role


def _deny():
    flash("You don't have permission to perform this action.", 'error')
    return redirect(url_for('achievements_bp.show_achievements'))


@achievements_bp.route('/achievements')
@require_workspace
def show_achievements():
    state = load_state()
    my_achievements = AchievementService.student_view_for(state)
    pending = AchievementService.pending_view(state.achievements) if state.role == Role.ADMIN else []

    return render_template('achievements.html',
                           state=state,
                           draft=state.draft,
                           my_achievements=my_achievements,
                           pending=pending)


@achievements_bp.route('/role/<role>', methods=['POST'])
@require_workspace
def switch_role(role):
    try:
        role = Role(role)
    except ValueError:
        abort(404)

    save_state(AchievementService.set_role(load_state(), role))
    return redirect(url_for('achievements_bp.show_achievements'))


@achievements_bp.route('/achievement/form', methods=['POST'])
@require_workspace
def submit_achievement():
    state = load_state()
    if not is_authorized(state, Role.STUDENT):
        return _deny()

    state, achievement = AchievementService.submit(state, FormDraft.from_form(request.form))
    save_state(state)
    if achievement:
        current_app.logger.info("Achievement %s submitted: %s", achievement.id, achievement.title)
    return redirect(url_for('achievements_bp.show_achievements'))


@achievements_bp.route('/achievement/form/draft', methods=['POST'])
@require_workspace
def update_draft():
    state = load_state()
    if not is_authorized(state, Role.STUDENT):
        return _deny()

    save_state(AchievementService.update_draft(state, FormDraft.from_form(request.form)))
    return redirect(url_for('achievements_bp.show_achievements'))


@achievements_bp.route('/achievement/form/reset', methods=['POST'])
@require_workspace
def reset_draft():
    state = load_state()
    if not is_authorized(state, Role.STUDENT):
        return _deny()

    save_state(AchievementService.reset_draft(state))
    return redirect(url_for('achievements_bp.show_achievements'))


@achievements_bp.route('/achievement/verify/<int:id>', methods=['POST'])
@require_workspace
def verify_achievement(id):
    state = load_state()
    if not is_authorized(state, Role.ADMIN):
        return _deny()

    save_state(AchievementService.verify(state, id))
    return redirect(url_for('achievements_bp.show_achievements'))


@achievements_bp.route('/achievement/delete/<int:id>', methods=['POST'])
@require_workspace
def delete_achievement(id):
    state = load_state()
    if not is_authorized(state, Role.ADMIN):
        return _deny()

    save_state(AchievementService.delete_record(state, id))
    return redirect(url_for('achievements_bp.show_achievements'))


@achievements_bp.route('/achievements/export/csv')
@require_workspace
def export_csv():
    state = load_state()
    if not is_authorized(state, Role.ADMIN):
        return _deny()

    output = AchievementExportService.generate_csv(state.achievements)
    return send_file(
        output,
        mimetype='text/csv',
        as_attachment=True,
        download_name=current_app.config['EXPORT_CSV_FILENAME']
    )


@achievements_bp.route('/achievements/export/pdf')
@require_workspace
def export_pdf():
    state = load_state()
    if not is_authorized(state, Role.ADMIN):
        return _deny()

    try:
        AchievementExportService.generate_pdf(state.achievements)
    except ExportNotImplementedError as e:
        current_app.logger.warning("PDF export requested: %s", e)
        flash(str(e), 'info')
    return redirect(url_for('achievements_bp.show_achievements'))
