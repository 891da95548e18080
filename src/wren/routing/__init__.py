"""Routing — ordered per-method route table with prefix groups.

Routes are registered during setup and scanned in registration order
at dispatch time; the first matching pattern wins.
"""
