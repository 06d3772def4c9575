"""Step settings."""
