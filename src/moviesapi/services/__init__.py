"""Query building and domain services."""
