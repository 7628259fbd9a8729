"""User management domain layer: profile repository contract and service."""
