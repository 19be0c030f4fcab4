"""Card lookup and deck rendering tools."""
