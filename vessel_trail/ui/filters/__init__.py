"""
Filter dialog components for the vessel trail dashboard.
"""
