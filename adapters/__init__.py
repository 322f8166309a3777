"""
EventLog framework adapters.
"""
