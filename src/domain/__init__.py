"""Domain layer: models and pure transformations."""
