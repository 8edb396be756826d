"""Infrastructure layer: text parsers and input sources."""
