"""
Pytest configuration and fixtures.
"""
import sys
import os
import pytest

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    from stutrack import create_app
    from config import Config

    class TestConfig(Config):
        TESTING = True
        SECRET_KEY = 'test-secret'
        CACHE_TYPE = 'SimpleCache'
        CACHE_DEFAULT_TIMEOUT = 0
        SERVER_NAME = 'localhost.localdomain'

    app = create_app(TestConfig)
    return app


@pytest.fixture(scope='function', autouse=True)
def clean_cache(app):
    """Drop every workspace between tests."""
    with app.app_context():
        from stutrack import cache
        cache.clear()
    yield


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


class WorkspaceActions:
    def __init__(self, app, client):
        self._app = app
        self._client = client

    def workspace_id(self):
        with self._client.session_transaction() as sess:
            return sess.get('workspace_id')

    def state(self):
        from stutrack.workspace import load_state
        workspace_id = self.workspace_id()
        assert workspace_id, "client has no workspace yet"
        with self._app.app_context():
            return load_state(workspace_id)

    def switch_role(self, role):
        return self._client.post(f'/role/{role}', follow_redirects=True)

    def submit(self, title='', activity_type='', student_id='', student_name=''):
        return self._client.post(
            '/achievement/form',
            data={
                'title': title,
                'activity_type': activity_type,
                'student_id': student_id,
                'student_name': student_name,
            },
            follow_redirects=True
        )


@pytest.fixture
def workspace(app, client):
    return WorkspaceActions(app, client)


@pytest.fixture
def captured_templates(app):
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template, context))

    from flask import template_rendered
    template_rendered.connect(record, app)
    try:
        yield recorded
    finally:
        template_rendered.disconnect(record, app)
