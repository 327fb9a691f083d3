"""
Core value types and algebra for occurrence multiplicity.

This module contains the foundational building blocks that are independent
of the surrounding schema compiler (grammar parsing, code generation, I/O).
"""
