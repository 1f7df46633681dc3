"""Infrastructure layer - logging, file access and collection utilities."""
