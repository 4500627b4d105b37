"""BFHL operations API."""
