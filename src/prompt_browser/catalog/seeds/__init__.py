"""Seed data for the Prompt Browser catalog."""
