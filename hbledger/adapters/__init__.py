"""Entry points wiring use cases to users."""
