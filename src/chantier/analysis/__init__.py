"""Parsing of AI budget-analysis responses."""

from chantier.analysis.parser import parse_analysis_categories

__all__ = ["parse_analysis_categories"]
