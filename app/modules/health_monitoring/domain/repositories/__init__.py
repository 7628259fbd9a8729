"""Repository interfaces for pests and plant diseases."""
