"""Tests for composite association ids."""

from __future__ import annotations

import pytest

from awx_reconciler.client.errors import ValidationError
from awx_reconciler.reconciler.identifiers import compose_id, split_id


def test_compose():
    assert compose_id("5", "9") == "5_9"


def test_split():
    assert split_id("5_9") == ("5", "9")


@pytest.mark.parametrize("bad", ["59", "5_9_1", "_9", "5_", "a_9", "5_\u00b2", "\u0663_9"])
def test_split_rejects_malformed(bad):
    with pytest.raises(ValidationError, match="association id"):
        split_id(bad)
