"""
# Test harness used by the `test` directories of the &systemkit packages.
"""
