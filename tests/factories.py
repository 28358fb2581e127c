"""Record builders shared by the tests."""

from models.project import ProjectRecord


def make_project(**overrides) -> ProjectRecord:
    """Record with neutral defaults; override only what a test cares about."""
    values = {
        'id': 'p',
        'code': 'PRJ-000',
        'name': 'Test Project',
        'bac': 100.0,
        'eac': 100.0,
        'pv': 50.0,
        'ev': 50.0,
        'ac': 50.0,
    }
    values.update(overrides)
    return ProjectRecord(**values)
