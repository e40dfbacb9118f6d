"""Infrastructure shared by the browser feature and the CLI."""
