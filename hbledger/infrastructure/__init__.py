"""Infrastructure adapters: file reading, settings, logging, wiring."""
