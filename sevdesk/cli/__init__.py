"""Command-line interface for the sevdesk client."""
