"""Domain layer abstractions."""
