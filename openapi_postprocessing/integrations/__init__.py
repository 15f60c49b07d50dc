"""Integrations with OpenAPI generators."""
