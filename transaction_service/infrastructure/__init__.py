"""Infrastructure adapters: storage, caching and concurrency primitives."""
