"""Employee Records package.

This package is organized by feature modules (durations, employees, ...)
with a thin Flask controller layer over service and repository layers.
"""
