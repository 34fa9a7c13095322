"""
Core symbol table, conversion algorithms, domain models and contracts.

This module contains the foundational building blocks of the vinculum codec;
it performs no I/O and configures no logging.
"""
