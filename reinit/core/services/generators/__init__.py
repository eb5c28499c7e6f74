"""
Generators — produce boilerplate file content from scratch.

Each template module exposes a module-level template string; ``content``
picks one by file type.
"""
