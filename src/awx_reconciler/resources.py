"""Field tables for every supported AWX resource kind."""

from __future__ import annotations

from awx_reconciler.client.errors import ValidationError
from awx_reconciler.models.credential import CredentialRecord
from awx_reconciler.models.inventory import HostRecord, InventoryRecord
from awx_reconciler.models.job_template import JobTemplateRecord, ScheduleRecord
from awx_reconciler.models.project import ProjectRecord
from awx_reconciler.reconciler.fields import FieldSpec, FieldType, ResourceKind, Variant

ID = FieldType.ID
BOOL = FieldType.BOOLEAN
INT = FieldType.INTEGER

# Fields shared by job templates and their schedules
_PLAYBOOK_FIELDS = (
    FieldSpec("job_type", default="run"),
    FieldSpec("inventory_id", ID, remote="inventory"),
    FieldSpec("playbook"),
    FieldSpec("scm_branch"),
    FieldSpec("forks", INT, default=0),
    FieldSpec("limit", default=""),
    FieldSpec("verbosity", INT, default=0),
    FieldSpec("extra_vars"),
    FieldSpec("job_tags"),
)

CREDENTIAL = ResourceKind(
    name="credential",
    description="Authentication material used by jobs, inventory sources and projects.",
    collection="/credentials/",
    singular="/credentials/{id}/",
    record=CredentialRecord,
    fields=(
        FieldSpec("name", required=True),
        FieldSpec("description"),
        FieldSpec("organization", ID, omit_if_empty=True),
        FieldSpec("credential_type", ID, required=True, read=False),
        FieldSpec("inputs", FieldType.MAP, required=True, read=False),
    ),
)

INVENTORY = ResourceKind(
    name="inventory",
    description="A collection of hosts jobs can run against.",
    collection="/inventories/",
    singular="/inventories/{id}/",
    record=InventoryRecord,
    fields=(
        FieldSpec("name", required=True),
        FieldSpec("description"),
        FieldSpec("organization", ID, omit_if_empty=True),
        FieldSpec("kind"),
        FieldSpec("host_filter"),
        FieldSpec("variables"),
        FieldSpec("prevent_instance_group_fallback", BOOL, default=False),
    ),
)

INVENTORY_HOST = ResourceKind(
    name="inventory_host",
    description="A managed node inside an inventory.",
    collection="/inventories/{inventory_id}/hosts/",
    singular="/hosts/{id}/",
    record=HostRecord,
    fields=(
        FieldSpec("name", required=True),
        FieldSpec("inventory_id", ID, remote="inventory", required=True),
        FieldSpec("description"),
        FieldSpec("enabled", BOOL, default=True),
        FieldSpec("instance_id"),
        FieldSpec("variables"),
    ),
)

PROJECT = ResourceKind(
    name="project",
    description="A collection of playbooks, usually backed by source control.",
    collection="/projects/",
    singular="/projects/{id}/",
    record=ProjectRecord,
    fields=(
        FieldSpec("name", required=True),
        FieldSpec("description"),
        FieldSpec("organization", ID, omit_if_empty=True),
        FieldSpec("local_path", read=False),
        FieldSpec("scm_type"),
        FieldSpec("scm_url"),
        FieldSpec("scm_branch"),
        FieldSpec("scm_refspec"),
        FieldSpec("scm_clean", BOOL, default=False),
        FieldSpec("scm_track_submodules", BOOL, default=False),
        FieldSpec("scm_delete_on_update", BOOL, default=False),
        FieldSpec("credential_id", ID, remote="credential", omit_if_empty=True),
        FieldSpec("scm_update_on_launch", BOOL, default=False),
        FieldSpec("allow_override", BOOL, default=False),
    ),
)

JOB_TEMPLATE = ResourceKind(
    name="job_template",
    description="A reusable definition for running a playbook.",
    collection="/job_templates/",
    singular="/job_templates/{id}/",
    record=JobTemplateRecord,
    fields=(
        FieldSpec("name", required=True),
        FieldSpec("description"),
        *_PLAYBOOK_FIELDS,
        FieldSpec("project_id", ID, remote="project"),
        FieldSpec("ask_inventory_on_launch", BOOL, default=False),
    ),
)

JOB_TEMPLATE_SCHEDULE = ResourceKind(
    name="job_template_schedule",
    description="A recurring run of a job template (iCal RRULE).",
    collection="/job_templates/{job_template_id}/schedules/",
    singular="/schedules/{id}/",
    record=ScheduleRecord,
    fields=(
        FieldSpec("name", required=True),
        FieldSpec("description"),
        FieldSpec("job_template_id", ID, remote="unified_job_template", required=True),
        *_PLAYBOOK_FIELDS,
        FieldSpec("project_id", ID, remote="project", omit_if_empty=True, read=False),
        FieldSpec("rrule"),
    ),
)

JOB_TEMPLATE_CREDENTIAL = ResourceKind(
    name="job_template_credential",
    description="Links a credential to a job template.",
    collection="/job_templates/{job_template_id}/credentials/",
    variant=Variant.ASSOCIATION,
    owner_field="job_template_id",
    related_field="credential_id",
    fields=(
        FieldSpec("job_template_id", ID, required=True, send=False),
        FieldSpec("credential_id", ID, required=True, send=False),
    ),
)

JOB_TEMPLATE_LAUNCH = ResourceKind(
    name="job_template_launch",
    description="Launches a job template; the job id becomes the resource id.",
    collection="/job_templates/{job_template_id}/launch/",
    variant=Variant.ACTION,
    fields=(
        FieldSpec("job_template_id", ID, required=True, send=False),
        FieldSpec("inventory_id", ID, remote="inventory", omit_if_empty=True),
        FieldSpec("extra_vars"),
    ),
)

KINDS: dict[str, ResourceKind] = {
    kind.name: kind
    for kind in (
        CREDENTIAL,
        INVENTORY,
        INVENTORY_HOST,
        PROJECT,
        JOB_TEMPLATE,
        JOB_TEMPLATE_SCHEDULE,
        JOB_TEMPLATE_CREDENTIAL,
        JOB_TEMPLATE_LAUNCH,
    )
}


def get_kind(name: str) -> ResourceKind:
    try:
        return KINDS[name]
    except KeyError:
        raise ValidationError(
            f"Unknown resource kind '{name}'. Known kinds: {', '.join(sorted(KINDS))}"
        ) from None


def list_kinds() -> list[ResourceKind]:
    return list(KINDS.values())
