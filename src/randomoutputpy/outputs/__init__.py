"""Handlers that report outputs and failures to the pipeline runner."""
