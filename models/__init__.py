"""
Models package for the Banker's Safety Checker.
Contains the allocation snapshot and the safety result.
"""
