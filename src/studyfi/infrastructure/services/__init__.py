"""Outbound services."""
