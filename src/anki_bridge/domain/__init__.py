"""Domain layer: note entities, ports and pure resolution services."""
