"""Core data models and pure helpers."""
