"""
reinit — initialize boilerplate files into a project directory.
"""

__version__ = "0.1.0"
