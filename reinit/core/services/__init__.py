"""
Core services — registry lookup, conflict handling, content and copy.
"""
