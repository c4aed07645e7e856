"""HTTP access to the AWX API."""
