"""Core configuration, persistence and error plumbing."""
