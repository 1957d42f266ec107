"""CLI command groups, discovered by the registry."""
