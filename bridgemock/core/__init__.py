"""Core models, errors and utilities for bridge adapters."""
