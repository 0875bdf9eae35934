"""pagewright services."""
