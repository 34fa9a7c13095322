"""
Test suite for the vinculum codec

Contains:
- tests/unit/          : Unit tests for symbol table, encoder, decoder, contracts, CLI
"""
