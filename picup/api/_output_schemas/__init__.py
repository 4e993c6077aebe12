"""Output schemas for API commands, registered per (domain, command)."""
