from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

os.environ.setdefault("RC_STORAGE", "memory")
os.environ.setdefault("RC_LOG_DIR", tempfile.mkdtemp(prefix="rc-logs-"))
