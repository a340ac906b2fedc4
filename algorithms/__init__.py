"""
Algorithms package for the Banker's Safety Checker.
Contains the safety algorithm (Banker's Algorithm) and sequence verification.
"""
