"""Routing — two-way mapping between localized paths and route descriptors.

Slug tables and their reverse indexes are built once at import and are
read-only afterwards; every function here is pure.
"""
