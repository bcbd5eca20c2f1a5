"""
User model and related database schema
Represents people whose workload is projected
"""
from datetime import datetime


ADMIN_ROLES = ('admin', 'Administrator', 'ADMIN')
COORDINATOR_ROLES = ('koordinator', 'Koordinator', 'coordinator', 'Coordinator')


def create_user_model(db):
    """Factory function to create User model with db instance"""

    class User(db.Model):
        """
        User model carrying the capacity profile used by the workload engine

        Attributes:
            id: Unique user identifier
            name: Display name
            email: Contact email
            role: Role name; admins and coordinators may view other users
            team_id: Team the user belongs to (coordinator scope)
            weekly_hours: Contracted hours per week
            workload_percent: Share of the contracted hours available for tasks
            is_active: Informational; inactive users are still projected
        """
        __tablename__ = 'users'

        id = db.Column(db.String(50), primary_key=True)
        name = db.Column(db.String(100))
        email = db.Column(db.String(120), unique=True, nullable=False)
        role = db.Column(db.String(50), nullable=False, default='member')
        team_id = db.Column(db.String(50), nullable=True)
        weekly_hours = db.Column(db.Float, nullable=False, default=40.0)
        workload_percent = db.Column(db.Integer, nullable=False, default=100)
        is_active = db.Column(db.Boolean, nullable=False, default=True)
        created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

        __table_args__ = (
            db.Index('idx_users_team', 'team_id'),
            db.Index('idx_users_role', 'role'),
        )

        def is_admin(self):
            """Check if the user holds an administrator role"""
            return self.role in ADMIN_ROLES

        def is_coordinator(self):
            """Check if the user holds a coordinator role"""
            return self.role in COORDINATOR_ROLES

        def can_view_others(self):
            """
            Check if the user may request data belonging to other users

            Returns:
                bool: True for administrators and coordinators
            """
            return self.is_admin() or self.is_coordinator()

        def __repr__(self):
            return f'<User {self.id}: {self.name}>'

    return User
