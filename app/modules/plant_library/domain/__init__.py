"""Plants library domain layer: repository contract and service."""
