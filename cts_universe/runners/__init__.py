"""
Command-line runners: single-puzzle solve and batch solve with receipts.
"""
