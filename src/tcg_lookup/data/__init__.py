"""Card and deck data."""
