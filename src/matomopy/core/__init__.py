"""Core domain: event model, parameter registry, validation and encoders."""
