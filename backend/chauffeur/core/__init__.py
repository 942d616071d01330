"""Core configuration and shared helpers."""
