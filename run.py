#!/usr/bin/env python3
"""Run Streamlit dashboard.

Usage:
    python run.py                    # Configured dataset (SURVEY_DATA_PATH)
    python run.py data/voters.csv    # Specific dataset
"""

import os
import subprocess
import sys
from pathlib import Path

env = dict(os.environ)
if len(sys.argv) > 1:
    env["SURVEY_DATA_PATH"] = sys.argv[1]

app = Path(__file__).parent / "web" / "streamlit" / "app.py"
subprocess.run([sys.executable, "-m", "streamlit", "run", str(app)], env=env)
