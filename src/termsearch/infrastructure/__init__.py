"""Infrastructure layer: distance computation, storage, logging."""
