"""Domain package for business rules and core models."""
