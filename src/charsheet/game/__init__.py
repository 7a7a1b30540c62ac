"""Game rules for charsheet."""
