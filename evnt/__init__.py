"""
evnt - a local calendar events store.
"""
