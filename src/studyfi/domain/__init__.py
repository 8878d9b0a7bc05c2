"""Domain layer: entities, exceptions and business services."""
