"""Domain layer: entities and pure services of the data workbench."""
