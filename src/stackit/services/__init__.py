"""Service layer: every operation takes the database session as an argument."""
