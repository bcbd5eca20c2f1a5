"""
Database models for the Workload Capacity Service
Centralizes all SQLAlchemy model creation using factory pattern
"""
from .user import create_user_model
from .sub_task import create_sub_task_models
from .absence import create_absence_model

_models = None


def init_models(db):
    """
    Initialize all models with the database instance

    Model classes are created once per process; later calls return the same
    classes so several app instances can share one metadata.

    Args:
        db: SQLAlchemy database instance

    Returns:
        dict: Dictionary containing all model classes
    """
    global _models
    if _models is None:
        User = create_user_model(db)
        SubTask, sub_task_assignees = create_sub_task_models(db)
        Absence = create_absence_model(db)

        _models = {
            'User': User,
            'SubTask': SubTask,
            'SubTaskAssignees': sub_task_assignees,
            'Absence': Absence,
        }
    return _models


__all__ = [
    'init_models',
    'create_user_model',
    'create_sub_task_models',
    'create_absence_model',
    # Model registry exports
    'model_registry',
    'get_models',
]

# Import registry for convenience
from .registry import model_registry, get_models
