"""Deployment listing pipeline: validation, transformation, rendering and diagnosis."""
