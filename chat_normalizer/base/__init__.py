"""Core building blocks: errors, logging, models, DTOs and parsing."""
