"""Name vibe: which languages does a first name sound like?

This package normalizes names, extracts character n-grams, and trains one
multinomial Naive Bayes model per gender to produce a probability
distribution over languages. Models are written as JSON and loaded back for
the `predict` command.
"""

__version__ = "0.1.0"
