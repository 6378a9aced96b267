"""User interfaces built on top of the multilang pipeline."""
