"""Plant data provider clients."""
