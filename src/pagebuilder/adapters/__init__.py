"""Integrations with host web frameworks."""
