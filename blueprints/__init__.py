"""blueprints/ — HTTP surface."""
