"""Domain layer - value types and the exception taxonomy shared by all collection functions."""
