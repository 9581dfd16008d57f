"""Transport-level integrations."""
