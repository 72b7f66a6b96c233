"""
Result models produced by the analysis engine.
"""
