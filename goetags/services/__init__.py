"""Service layer helpers for goetags."""
