"""Request and response services."""
