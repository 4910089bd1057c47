"""
Core module - settings, logging and the error taxonomy.
"""
