"""Job template, schedule, association and launch models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class JobTemplateRecord(BaseModel):
    """A job template as returned by ``/job_templates/{id}/``."""

    id: float | None = None
    name: str | None = None
    description: str | None = None
    job_type: str | None = None
    inventory: float | None = None
    project: float | None = None
    playbook: str | None = None
    scm_branch: str | None = None
    forks: int | None = None
    limit: str | None = None
    verbosity: int | None = None
    extra_vars: str | None = None
    job_tags: str | None = None
    ask_inventory_on_launch: bool | None = None


class ScheduleRecord(BaseModel):
    """A schedule as returned by ``/schedules/{id}/``."""

    id: float | None = None
    name: str | None = None
    description: str | None = None
    unified_job_template: float | None = None
    job_type: str | None = None
    inventory: float | None = None
    playbook: str | None = None
    scm_branch: str | None = None
    forks: int | None = None
    limit: str | None = None
    verbosity: int | None = None
    extra_vars: str | None = None
    job_tags: str | None = None
    rrule: str | None = None


class AssociatedRecord(BaseModel):
    """An entry of a sub-collection listing; only the id matters."""

    model_config = ConfigDict(strict=True)

    id: float


class LaunchedJob(BaseModel):
    """The job spawned by ``/job_templates/{id}/launch/``."""

    model_config = ConfigDict(strict=True)

    id: float
    status: str | None = None
