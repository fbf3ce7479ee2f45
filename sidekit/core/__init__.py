"""Core primitives: errors, types, byte sources and ID generation."""
