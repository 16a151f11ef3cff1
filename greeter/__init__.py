"""Static greeting HTTP service."""
