"""Statistics primitives used by column separator inference."""
