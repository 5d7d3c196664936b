"""Infrastructure layer - snapshot storage and shell access."""
