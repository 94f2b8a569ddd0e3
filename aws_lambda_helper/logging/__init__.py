"""Logging configuration and audit helpers."""
