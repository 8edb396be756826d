"""Domain layer: homework models and errors."""
