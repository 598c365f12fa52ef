"""Prompt Browser backend."""
