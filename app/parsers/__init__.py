"""
app/parsers package marker.
"""

from app.parsers.csv_tokenizer import tokenize

__all__ = ["tokenize"]
