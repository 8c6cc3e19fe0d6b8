"""Infrastructure adapters: model access, parsing, storage."""
