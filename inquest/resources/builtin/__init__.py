"""Built-in resources."""
