"""Core configuration and shared schemas."""
