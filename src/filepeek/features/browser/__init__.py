"""Interactive directory browser feature."""
