"""
Command-line interface for the vinculum codec.
"""
