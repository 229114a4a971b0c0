"""Infrastructure layer - metrics."""
