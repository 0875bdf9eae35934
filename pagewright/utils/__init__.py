"""pagewright utilities."""
