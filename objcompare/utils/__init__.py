"""Logging and timezone helpers."""
