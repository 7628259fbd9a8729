"""Response schemas for pests and plant diseases."""
