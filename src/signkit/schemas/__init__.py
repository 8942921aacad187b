"""JSON Schemas for outgoing resource documents."""
