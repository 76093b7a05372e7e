"""Business logic: credential store, post repository operations and ownership checks."""
