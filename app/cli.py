"""
Console entry point: `brick-ledger` launches the Streamlit dashboard.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from streamlit.web import cli as stcli

DASHBOARD_PATH = Path(__file__).resolve().parent / "streamlit_app.py"


def main(argv: Optional[List[str]] = None) -> None:
    """Run `streamlit run app/streamlit_app.py`, forwarding any extra arguments."""
    extra = list(sys.argv[1:] if argv is None else argv)
    sys.argv = ["streamlit", "run", str(DASHBOARD_PATH), *extra]
    sys.exit(stcli.main())
