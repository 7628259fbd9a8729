"""Weather provider integrations."""
