"""Infrastructure adapters: storage, export and seed data."""
