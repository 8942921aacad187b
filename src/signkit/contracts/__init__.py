"""Validation contracts for the signing API entities."""
