"""Startup Benefits API."""
