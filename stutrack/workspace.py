"""Workspace utilities: one in-memory AppState per browser session."""
import uuid
from functools import wraps

from flask import session

from . import cache
from .models import AppState

WORKSPACE_SESSION_KEY = 'workspace_id'


def get_current_workspace_id():
    """
    Get the current workspace ID from session.

    Returns:
        str: Current workspace ID or None if not set
    """
    return session.get(WORKSPACE_SESSION_KEY)


def get_or_create_workspace_id():
    """
    Get current workspace ID or start a new workspace if not set.

    Returns:
        str: Current workspace ID
    """
    workspace_id = get_current_workspace_id()
    if not workspace_id:
        workspace_id = uuid.uuid4().hex
        session[WORKSPACE_SESSION_KEY] = workspace_id
    return workspace_id


def _cache_key(workspace_id):
    return f"workspace:{workspace_id}"


def load_state(workspace_id=None):
    """
    Load the AppState of a workspace.

    Args:
        workspace_id (str): Workspace to load, defaults to the session's one

    Returns:
        AppState: Stored state, or a fresh one for a new workspace
    """
    workspace_id = workspace_id or get_or_create_workspace_id()
    state = cache.get(_cache_key(workspace_id))
    return state if state is not None else AppState()


def save_state(state, workspace_id=None):
    workspace_id = workspace_id or get_or_create_workspace_id()
    cache.set(_cache_key(workspace_id), state)
    return state


def clear_workspace(workspace_id=None):
    workspace_id = workspace_id or get_current_workspace_id()
    if workspace_id:
        cache.delete(_cache_key(workspace_id))


def require_workspace(f):
    """
    Decorator to ensure a workspace exists before executing route.

    Usage:
        @bp.route('/achievements')
        @require_workspace
        def show_achievements():
            state = load_state()
            ...
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        get_or_create_workspace_id()
        return f(*args, **kwargs)
    return decorated_function
