"""Output schemas for solved homework."""
