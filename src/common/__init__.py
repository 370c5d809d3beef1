"""Helpers shared across the CLI and the resolver."""
