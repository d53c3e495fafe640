"""Application layer orchestrating features for the CLI and future UIs."""
