"""Core app package: landing page and health check."""
