"""Typer commands for Todo CLI."""
