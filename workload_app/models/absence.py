"""
Absence model
Whole-day intervals in which a user is not available for work
"""
from datetime import datetime


ABSENCE_TYPES = ('vacation', 'workshop', 'sick', 'other')

ABSENCE_COLORS = {
    'vacation': '#22c55e',
    'workshop': '#3b82f6',
    'sick': '#ef4444',
    'other': '#a855f7',
}
DEFAULT_ABSENCE_COLOR = '#6b7280'


def default_color(absence_type):
    """Return the display color for an absence type"""
    return ABSENCE_COLORS.get(absence_type, DEFAULT_ABSENCE_COLOR)


def create_absence_model(db):
    """Factory function to create Absence model with db instance"""

    class Absence(db.Model):
        """
        Recorded absence of a user, start and end dates inclusive
        """
        __tablename__ = 'absences'

        id = db.Column(db.Integer, primary_key=True, autoincrement=True)
        user_id = db.Column(db.String(50), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
        title = db.Column(db.String(200), nullable=False)
        type = db.Column(db.String(20), nullable=False, default='other')
        start_date = db.Column(db.Date, nullable=False)
        end_date = db.Column(db.Date, nullable=False)
        description = db.Column(db.Text, nullable=True)
        color = db.Column(db.String(20), nullable=True)
        created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

        user = db.relationship('User', backref=db.backref('absences', lazy='dynamic'))

        __table_args__ = (
            db.Index('idx_absences_user_dates', 'user_id', 'start_date', 'end_date'),
            db.CheckConstraint('end_date >= start_date', name='check_absence_date_range'),
        )

        def overlaps(self, start, end):
            """
            Check if the absence touches the closed range [start, end]

            Args:
                start: First day of the range
                end: Last day of the range

            Returns:
                bool: True if at least one day is shared
            """
            return self.start_date <= end and self.end_date >= start

        def to_dict(self):
            """Convert to dictionary for JSON serialization"""
            return {
                'id': self.id,
                'userId': self.user_id,
                'title': self.title,
                'type': self.type,
                'startDate': self.start_date.isoformat(),
                'endDate': self.end_date.isoformat(),
                'description': self.description,
                'color': self.color,
                'user': {
                    'id': self.user.id,
                    'name': self.user.name,
                    'email': self.user.email,
                } if self.user else None,
                'createdAt': self.created_at.isoformat() if self.created_at else None,
            }

        def __repr__(self):
            return f'<Absence {self.user_id}: {self.start_date} to {self.end_date}>'

    return Absence
