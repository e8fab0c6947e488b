"""Infrastructure layer: storage adapters."""
