"""Statistics collection and result export."""
