"""API Schemas: Pydantic response models for the HTTP boundary."""
