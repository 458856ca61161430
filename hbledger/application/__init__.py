"""Application layer: ports, queries and use cases."""
