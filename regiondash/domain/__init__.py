"""Domain Layer: value objects, models, errors and interfaces (ports)."""
