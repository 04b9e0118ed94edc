"""Domain layer for pesatrack application."""
