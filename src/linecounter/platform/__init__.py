"""Platform services (logging) shared across features."""
