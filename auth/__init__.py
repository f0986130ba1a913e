"""auth/ — Login credential checks."""
