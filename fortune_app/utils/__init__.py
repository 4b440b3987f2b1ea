"""
Utility functions module.

Time Semantics:
- The fortune inputs never carry a time; the only wall-clock read is the
  current calendar month used by the seasonal adjustment
- Callers that need reproducible output pass the month explicitly
"""
