"""Pick the reconciler class for a resource kind."""

from __future__ import annotations

from awx_reconciler.client.executor import RequestExecutor
from awx_reconciler.reconciler.action import LaunchReconciler
from awx_reconciler.reconciler.association import AssociationReconciler
from awx_reconciler.reconciler.engine import Reconciler
from awx_reconciler.reconciler.fields import ResourceKind, Variant
from awx_reconciler.resources import get_kind

_VARIANTS: dict[Variant, type[Reconciler]] = {
    Variant.STANDARD: Reconciler,
    Variant.ASSOCIATION: AssociationReconciler,
    Variant.ACTION: LaunchReconciler,
}


def reconciler_for(executor: RequestExecutor, kind: ResourceKind | str) -> Reconciler:
    """Return a reconciler bound to *executor* for *kind* (a kind or its name)."""
    if isinstance(kind, str):
        kind = get_kind(kind)
    return _VARIANTS[kind.variant](executor, kind)
