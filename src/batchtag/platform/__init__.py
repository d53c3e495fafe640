"""Platform services shared by every feature (logging, filesystem helpers)."""
