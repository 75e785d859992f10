"""Data access functions for the FutCerto service."""
