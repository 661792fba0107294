"""HTTP API for notus-dx."""
