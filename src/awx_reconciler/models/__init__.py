"""Pydantic data models for the AWX REST API."""

from awx_reconciler.models.common import CreatedRecord, ListResponse
from awx_reconciler.models.credential import CredentialRecord, CredentialType
from awx_reconciler.models.inventory import HostRecord, InventoryRecord
from awx_reconciler.models.job_template import (
    AssociatedRecord,
    JobTemplateRecord,
    LaunchedJob,
    ScheduleRecord,
)
from awx_reconciler.models.project import ProjectRecord

__all__ = [
    "AssociatedRecord",
    "CreatedRecord",
    "CredentialRecord",
    "CredentialType",
    "HostRecord",
    "InventoryRecord",
    "JobTemplateRecord",
    "LaunchedJob",
    "ListResponse",
    "ProjectRecord",
    "ScheduleRecord",
]
