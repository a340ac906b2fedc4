"""
Utilities package for the Banker's Safety Checker.
Contains input loading, configuration and logging.
"""
