"""Domain layer: entities, repository contracts and the error taxonomy."""
