"""Application layer: ports and use cases for capture, flush and query."""
