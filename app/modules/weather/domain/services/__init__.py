"""Weather mapping, advice and hazard rules."""
