"""Internal utilities for outline2html."""
