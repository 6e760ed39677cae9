"""Static tables shared across the content API."""
