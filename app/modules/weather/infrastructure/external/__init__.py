"""Weather provider clients."""
