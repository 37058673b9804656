"""romhan: romanized Korean to Hangul input method for IBus."""

__version__ = "0.1.0"
