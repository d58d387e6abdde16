"""Shared type aliases and enums."""
