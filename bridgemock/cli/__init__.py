"""Command line interface for bridge adapters."""
