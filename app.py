from __future__ import annotations

from challenges.app import run_app

run_app()
