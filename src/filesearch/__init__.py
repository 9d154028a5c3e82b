"""filesearch - ranked file name search with match highlighting."""

__version__ = "0.1.0"
