"""
Models package for StuTrack.

Plain immutable values; there is no database. The whole application state of
a workspace is a single AppState instance.
"""
from .achievement import Achievement, FormDraft
from .state import AppState, Role

__all__ = ['Achievement', 'FormDraft', 'AppState', 'Role']
