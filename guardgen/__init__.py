"""
guardgen — combinatorial test-source generator for guarded members.
"""

__version__ = "0.1.0"
