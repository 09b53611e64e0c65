"""Campus Events package.

This package is organized by feature modules (colleges, events, registrations,
reports, ...) with a thin Flask controller layer over service/repository layers.
"""
