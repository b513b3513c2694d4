"""Observability helpers for the registry service.

Request IDs + structlog contextvars, plus an in-memory metrics snapshot endpoint.
"""
