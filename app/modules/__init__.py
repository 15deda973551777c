"""
Feature modules of the plant tracker.

Each module follows the same layering: domain, application (where a use case spans
modules), infrastructure and presentation.
"""
