"""
Sub-task model
Units of work with an estimate and a due date, assigned to one or more users
"""
from datetime import datetime


def create_sub_task_models(db):
    """
    Factory function to create the SubTask model and its assignee table

    A sub-task reaches a user either through its direct assignee column or
    through the many-to-many assignee list. Both paths may point at the same
    user for the same task.

    Returns:
        tuple: (SubTask, sub_task_assignees table)
    """

    sub_task_assignees = db.Table(
        'sub_task_assignees',
        db.Column('sub_task_id', db.Integer, db.ForeignKey('sub_tasks.id', ondelete='CASCADE'), primary_key=True),
        db.Column('user_id', db.String(50), db.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
    )

    class SubTask(db.Model):
        """
        Sub-task with effort estimate

        Attributes:
            title: Short description
            completed: Completed tasks are ignored by the workload engine
            estimated_hours: Estimated effort in hours (optional)
            due_date: Local calendar day the task is due (optional)
            assignee_id: Direct assignee
            assignees: Additional assignees
        """
        __tablename__ = 'sub_tasks'

        id = db.Column(db.Integer, primary_key=True, autoincrement=True)
        title = db.Column(db.String(200), nullable=False)
        completed = db.Column(db.Boolean, nullable=False, default=False)
        estimated_hours = db.Column(db.Float, nullable=True)
        due_date = db.Column(db.Date, nullable=True)
        assignee_id = db.Column(db.String(50), db.ForeignKey('users.id'), nullable=True)
        created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
        updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

        assignees = db.relationship(
            'User',
            secondary=sub_task_assignees,
            lazy='selectin',
            backref=db.backref('shared_sub_tasks', lazy='dynamic'),
        )

        __table_args__ = (
            db.Index('idx_sub_tasks_assignee_open', 'assignee_id', 'completed'),
            db.Index('idx_sub_tasks_due_date', 'due_date'),
        )

        def __repr__(self):
            return f'<SubTask {self.id}: {self.title}>'

    return SubTask, sub_task_assignees
