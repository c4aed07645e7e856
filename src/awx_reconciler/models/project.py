"""Project models."""

from __future__ import annotations

from pydantic import BaseModel


class ProjectRecord(BaseModel):
    """A project as returned by ``/projects/{id}/``."""

    id: float | None = None
    name: str | None = None
    description: str | None = None
    organization: float | None = None
    local_path: str | None = None
    scm_type: str | None = None
    scm_url: str | None = None
    scm_branch: str | None = None
    scm_refspec: str | None = None
    scm_clean: bool | None = None
    scm_track_submodules: bool | None = None
    scm_delete_on_update: bool | None = None
    credential: float | None = None
    scm_update_on_launch: bool | None = None
    allow_override: bool | None = None
