"""Adapters: filesystem edits, git and the package manager."""
