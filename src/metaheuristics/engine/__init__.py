"""Search algorithms built on the foundation layer."""
