"""Infrastructure layer: MongoDB persistence."""
