"""Chantier: budget categories for residential construction projects.

Derives canonical budget categories from the construction-step guide and
reconciles AI budget analyses against them.
"""

__version__ = "0.1.0"
