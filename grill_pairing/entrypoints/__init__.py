"""Entrypoints: composition roots for orchestrators and the CLI."""
