"""Option models for element rendering."""
