"""Infrastructure adapters: persistence, configuration, logging."""
