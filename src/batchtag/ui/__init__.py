"""User interfaces built on the application services."""
