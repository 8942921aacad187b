"""Self-validating models for envelopes, signers, documents and their links."""
