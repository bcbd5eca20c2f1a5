"""
Pytest configuration and fixtures for the Workload Capacity Service tests.

This module provides shared fixtures for:
- Flask application with test configuration
- Database setup and teardown
- Model factories for creating test data
- Logging a caller into the signed session
"""
import itertools
import pytest
from datetime import date, timedelta

from workload_app import create_app
from workload_app.extensions import db as _db


@pytest.fixture(scope='session')
def app():
    """
    Create application for the tests.

    Uses TestingConfig with in-memory SQLite database.
    Scope is 'session' to reuse the same app across all tests.
    """
    app = create_app('testing')
    app.config.update({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'WTF_CSRF_ENABLED': False,
    })
    return app


@pytest.fixture(scope='function')
def db(app):
    """
    Create database for the tests.

    Creates all tables before each test function and drops them after.
    """
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope='function')
def client(app, db):
    """Create a test client for the app."""
    with app.test_client() as client:
        yield client


@pytest.fixture(scope='function')
def models(app, db):
    """Get all models from the model registry."""
    from workload_app.models import get_models
    return get_models()


@pytest.fixture
def login(client):
    """
    Put a user's ID into the session, as the login service would.

    Usage:
        login(user)
        response = client.get('/api/workload')
    """
    def _login(user):
        with client.session_transaction() as sess:
            sess['user_id'] = user.id
        return user

    return _login


# =============================================================================
# Model Factories
# =============================================================================

@pytest.fixture
def user_factory(models, db):
    """
    Factory for creating User instances.

    Usage:
        user = user_factory(name="Jane Doe")
        admin = user_factory(role="admin")
    """
    counter = itertools.count(1)

    def _create_user(**kwargs):
        User = models['User']
        n = next(counter)
        defaults = {
            'id': f'USR{n:03d}',
            'name': f'Test User {n}',
            'email': f'user{n}@example.com',
            'role': 'member',
            'weekly_hours': 40.0,
            'workload_percent': 100,
        }
        defaults.update(kwargs)
        user = User(**defaults)
        db.session.add(user)
        db.session.commit()
        return user

    return _create_user


@pytest.fixture
def sub_task_factory(models, db):
    """
    Factory for creating SubTask instances.

    Usage:
        task = sub_task_factory(assignee=user, estimated_hours=8, due_date=date(2024, 1, 12))
        task = sub_task_factory(assignees=[user_a, user_b])
    """
    def _create_sub_task(assignee=None, assignees=(), **kwargs):
        SubTask = models['SubTask']
        defaults = {
            'title': 'Test task',
            'completed': False,
            'estimated_hours': 8.0,
            'due_date': date.today() + timedelta(days=7),
            'assignee_id': assignee.id if assignee else None,
        }
        defaults.update(kwargs)
        task = SubTask(**defaults)
        task.assignees.extend(assignees)
        db.session.add(task)
        db.session.commit()
        return task

    return _create_sub_task


@pytest.fixture
def absence_factory(models, db):
    """Factory for creating Absence instances."""
    def _create_absence(user, **kwargs):
        Absence = models['Absence']
        defaults = {
            'user_id': user.id,
            'title': 'Vacation',
            'type': 'vacation',
            'start_date': date.today(),
            'end_date': date.today() + timedelta(days=2),
        }
        defaults.update(kwargs)
        absence = Absence(**defaults)
        db.session.add(absence)
        db.session.commit()
        return absence

    return _create_absence
