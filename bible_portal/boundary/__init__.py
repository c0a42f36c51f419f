"""Boundary adapters: database, AI gateway and lexicon file store."""
