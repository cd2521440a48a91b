"""Framework adapters that map source references to files on disk."""
