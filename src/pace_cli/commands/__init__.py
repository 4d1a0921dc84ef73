"""Command modules for the pace CLI."""
