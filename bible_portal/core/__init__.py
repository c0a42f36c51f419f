"""Core domain logic: study chat streaming and Strong's lexicon parsing."""
