"""
Generators — produce C# source files from static axis configuration.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile`` instance.
"""
