"""Personal home page with a to-do list."""
