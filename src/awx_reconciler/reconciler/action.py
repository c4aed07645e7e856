"""Action kinds: a one-shot remote action modelled as a resource."""

from __future__ import annotations

from awx_reconciler.models.job_template import LaunchedJob
from awx_reconciler.reconciler.engine import Reconciler
from awx_reconciler.reconciler.state import ResourceState


class LaunchReconciler(Reconciler):
    """Launches a job; the spawned job id becomes the local id.

    The job is not a reconcilable record, so read does nothing and delete only
    forgets the id. The remote job is never cancelled.
    """

    def _launch(self, operation: str, state: ResourceState) -> ResourceState:
        with self._operation(operation):
            self.validate(state)
            data = self.executor.post(self.collection_path(state), self.build_payload(state))
            state.id = self.extract_id(data, LaunchedJob)
        self._log("launched", state)
        return state

    def create(self, state: ResourceState) -> ResourceState:
        return self._launch("create", state)

    def update(self, state: ResourceState) -> ResourceState:
        return self._launch("update", state)

    def read(self, state: ResourceState) -> ResourceState:
        return state

    def delete(self, state: ResourceState) -> ResourceState:
        state.mark_absent()
        return state
