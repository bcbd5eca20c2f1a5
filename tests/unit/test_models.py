"""
Unit tests for database models.

Tests cover:
- Model creation and default values
- Role helpers on User
- Task assignment through both association paths
- Absence overlap and serialization
"""
import pytest
from datetime import date
from sqlalchemy.exc import IntegrityError


class TestUserModel:
    """Tests for the User model."""

    @pytest.mark.unit
    def test_create_user(self, models, db):
        User = models['User']
        user = User(id='u1', name='Jane Doe', email='jane@example.com')
        db.session.add(user)
        db.session.commit()

        assert user.role == 'member'
        assert user.weekly_hours == 40.0
        assert user.workload_percent == 100
        assert user.is_active is True
        assert user.created_at is not None

    @pytest.mark.unit
    def test_email_must_be_unique(self, user_factory, db):
        user_factory(email='dup@example.com')
        with pytest.raises(IntegrityError):
            user_factory(email='dup@example.com')
        db.session.rollback()

    @pytest.mark.unit
    @pytest.mark.parametrize('role, admin, coordinator', [
        ('admin', True, False),
        ('Administrator', True, False),
        ('koordinator', False, True),
        ('Coordinator', False, True),
        ('member', False, False),
    ])
    def test_role_helpers(self, user_factory, role, admin, coordinator):
        user = user_factory(role=role)

        assert user.is_admin() is admin
        assert user.is_coordinator() is coordinator
        assert user.can_view_others() is (admin or coordinator)

    @pytest.mark.unit
    def test_repr(self, user_factory):
        user = user_factory(id='USR123', name='Test Person')
        assert 'USR123' in repr(user)
        assert 'Test Person' in repr(user)


class TestSubTaskModel:
    """Tests for the SubTask model."""

    @pytest.mark.unit
    def test_defaults(self, models, db):
        SubTask = models['SubTask']
        task = SubTask(title='Write report')
        db.session.add(task)
        db.session.commit()

        assert task.id is not None
        assert task.completed is False
        assert task.estimated_hours is None
        assert task.due_date is None

    @pytest.mark.unit
    def test_shared_assignees(self, user_factory, sub_task_factory):
        owner = user_factory()
        helper = user_factory()
        task = sub_task_factory(assignee=owner, assignees=[owner, helper])

        assert task.assignee_id == owner.id
        assert {user.id for user in task.assignees} == {owner.id, helper.id}
        assert helper.shared_sub_tasks.all() == [task]


class TestAbsenceModel:
    """Tests for the Absence model."""

    @pytest.mark.unit
    def test_overlaps(self, user_factory, absence_factory):
        absence = absence_factory(
            user_factory(), start_date=date(2024, 1, 10), end_date=date(2024, 1, 12)
        )

        assert absence.overlaps(date(2024, 1, 12), date(2024, 1, 20))
        assert absence.overlaps(date(2024, 1, 1), date(2024, 1, 10))
        assert absence.overlaps(date(2024, 1, 11), date(2024, 1, 11))
        assert not absence.overlaps(date(2024, 1, 13), date(2024, 1, 20))
        assert not absence.overlaps(date(2024, 1, 1), date(2024, 1, 9))

    @pytest.mark.unit
    def test_end_before_start_rejected(self, user_factory, absence_factory, db):
        user = user_factory()
        with pytest.raises(IntegrityError):
            absence_factory(user, start_date=date(2024, 1, 12), end_date=date(2024, 1, 10))
        db.session.rollback()

    @pytest.mark.unit
    def test_to_dict(self, user_factory, absence_factory):
        user = user_factory(id='u7', name='Ann', email='ann@example.com')
        absence = absence_factory(
            user,
            title='Conference',
            type='workshop',
            start_date=date(2024, 3, 4),
            end_date=date(2024, 3, 5),
            color='#3b82f6',
        )

        data = absence.to_dict()

        assert data['userId'] == 'u7'
        assert data['type'] == 'workshop'
        assert data['startDate'] == '2024-03-04'
        assert data['endDate'] == '2024-03-05'
        assert data['color'] == '#3b82f6'
        assert data['user'] == {'id': 'u7', 'name': 'Ann', 'email': 'ann@example.com'}
