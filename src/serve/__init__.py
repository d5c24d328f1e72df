"""Read-only HTTP serving of generated record collections."""
