"""Pydantic Schemas — response models for the read API."""
