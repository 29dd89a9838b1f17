"""Infrastructure layer: adapters for the database and file storage."""
