"""Infrastructure adapters: logging, settings, repositories, wiring."""
