"""Blog service Django project."""
