"""Output layer.

This module renders merged user directories into device file layouts
and exposes the SDK client that drives a full build.
"""
