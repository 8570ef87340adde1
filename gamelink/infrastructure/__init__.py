"""Infrastructure adapters (HTTP backend, logging, scheduling, clock)."""
