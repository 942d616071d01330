"""Chauffeur fleet availability service."""
