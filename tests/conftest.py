from __future__ import annotations

import os

os.environ.setdefault("TEXT_SLICES_DISABLE_CONSOLE", "1")
