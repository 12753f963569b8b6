"""Domain layer: entities and the rules that do not touch storage."""
