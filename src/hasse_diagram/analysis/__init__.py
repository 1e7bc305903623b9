"""
Diagram summaries and poset comparisons.
"""

from .report import DiagramReport, analyze_diagram
from .superset import SupersetResult, format_superset_report, is_superset, superset_report

__all__ = [
    "DiagramReport",
    "analyze_diagram",
    "SupersetResult",
    "format_superset_report",
    "is_superset",
    "superset_report",
]
