"""
Analysis package for the Banker's Safety Checker.
Contains the trace of the safety simulation.
"""
