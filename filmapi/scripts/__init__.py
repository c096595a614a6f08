"""Maintenance scripts for the Film API."""
