"""Database package: declarative base and shared column mixins."""
