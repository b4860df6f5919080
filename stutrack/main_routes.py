from flask import Blueprint, redirect, url_for

main_bp = Blueprint('main_bp', __name__)

@main_bp.route('/')
def index():
    return redirect(url_for('achievements_bp.show_achievements'))
