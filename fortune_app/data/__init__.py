"""
Input parsing for raw form values.
"""
