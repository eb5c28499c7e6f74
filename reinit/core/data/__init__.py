"""
Static data for reinit — built once at import, read-only afterwards.
"""
