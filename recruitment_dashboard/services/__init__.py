"""
Services module - store adapter, validation, query building and analytics.
"""
