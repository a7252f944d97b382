"""HTTP routes for plan parsing."""
