"""Bible study portal backend: streaming study chat and Strong's lexicon tooling."""

__version__ = "0.1.0"
