"""Domain layer: business services and the error taxonomy."""
