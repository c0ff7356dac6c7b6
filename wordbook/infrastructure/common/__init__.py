"""Infrastructure shared across contexts."""
