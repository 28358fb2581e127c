"""In-memory project store for the dashboard."""

from __future__ import annotations
import dataclasses
import logging
import uuid
from typing import Dict, Iterable, List, Optional, Set

from models.project import ProjectRecord, ProjectValidator


logger = logging.getLogger(__name__)


def generate_id() -> str:
    """Return a new opaque identifier."""
    return uuid.uuid4().hex[:9]


class ProjectStore:
    """Owns the collection of project records.

    Records keep insertion order. Every id the store has issued or accepted is
    remembered, so a deleted project's id is never handed out again.
    """

    def __init__(self, projects: Optional[Iterable[ProjectRecord]] = None):
        self._projects: Dict[str, ProjectRecord] = {}
        self._issued_ids: Set[str] = set()
        for project in projects or ():
            self.upsert(project)

    def __len__(self) -> int:
        return len(self._projects)

    def __contains__(self, project_id: str) -> bool:
        return project_id in self._projects

    def _new_id(self) -> str:
        project_id = generate_id()
        while project_id in self._issued_ids:
            project_id = generate_id()
        return project_id

    # Read operations
    def list_all(self) -> List[ProjectRecord]:
        """All records in insertion order (a new list each call)."""
        return list(self._projects.values())

    def get(self, project_id: str) -> ProjectRecord:
        """Return a record by id."""
        try:
            return self._projects[project_id]
        except KeyError:
            raise ValueError(f"Project ID {project_id} not found") from None

    def find(self, project_id: Optional[str]) -> Optional[ProjectRecord]:
        """Return a record by id, or None."""
        if project_id is None:
            return None
        return self._projects.get(project_id)

    # Write operations
    def create(self, project: ProjectRecord) -> ProjectRecord:
        """Insert a new record under a freshly issued id and return it."""
        created = dataclasses.replace(project, id=self._new_id())
        self._issued_ids.add(created.id)
        self._projects[created.id] = created
        logger.info(f"Created project {created.code} ({created.id})")
        return created

    def upsert(self, project: ProjectRecord) -> ProjectRecord:
        """Replace the record with the same id, or insert it.

        A record without an id is treated as new and gets one issued.
        """
        if not project.id:
            return self.create(project)
        action = "Updated" if project.id in self._projects else "Inserted"
        self._issued_ids.add(project.id)
        self._projects[project.id] = project
        logger.info(f"{action} project {project.code} ({project.id})")
        return project

    def save(self, project: ProjectRecord) -> ProjectRecord:
        """Validate then upsert; raises ValueError listing the form errors."""
        errors = ProjectValidator.validate_record(project)
        if errors:
            raise ValueError("; ".join(errors))
        return self.upsert(project)

    def delete(self, project_id: str) -> None:
        """Remove a record from the collection."""
        if project_id not in self._projects:
            raise ValueError(f"Project ID {project_id} not found")
        removed = self._projects.pop(project_id)
        logger.info(f"Deleted project {removed.code} ({project_id})")
