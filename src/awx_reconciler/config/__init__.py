"""Connection profiles and CLI configuration."""
