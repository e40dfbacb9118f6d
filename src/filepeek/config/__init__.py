"""Configuration loading and the settings passed to browser components."""
