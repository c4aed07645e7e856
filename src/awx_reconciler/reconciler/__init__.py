"""Generic reconciliation engine and its association and action variants."""
