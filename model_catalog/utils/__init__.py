"""
Utilities.

Helpers shared across the application: HTML fragment checks, the catalog JSON
schema, display formatting and the structured event log.
"""
