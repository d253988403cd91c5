"""
Reports — tables, summary metrics, and export of a projection.
"""

from .tables import projection_to_frame, chart_frame
from .metrics import summarize_projection, share_progression
from .export import EXPORT_FILENAMES, to_csv_text, to_json_text, to_excel_bytes

__all__ = [
    "projection_to_frame",
    "chart_frame",
    "summarize_projection",
    "share_progression",
    "EXPORT_FILENAMES",
    "to_csv_text",
    "to_json_text",
    "to_excel_bytes",
]
