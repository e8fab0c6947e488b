"""Application layer: use cases composed from the domain and repositories."""
