"""Composition root, entrypoint and slash commands."""
