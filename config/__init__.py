"""
EventLog Django project configuration.
"""
