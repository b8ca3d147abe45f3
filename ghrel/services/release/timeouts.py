from __future__ import annotations

GH_RELEASE_TIMEOUT_SECONDS = 3 * 60.0
