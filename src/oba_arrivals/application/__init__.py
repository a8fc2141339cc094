"""Application layer - use cases for polling arrivals."""
