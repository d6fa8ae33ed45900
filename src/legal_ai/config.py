"""
Runtime settings.

Resolution order, later wins: defaults, ~/.legal-ai/config.json,
environment variables, explicit keyword overrides.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_STATE_DIR = Path.home() / ".legal-ai"
CONFIG_FILENAME = "config.json"
SESSION_FILENAME = "session.json"

ENV_VARS = {
    "SUPABASE_URL": "supabase_url",
    "SUPABASE_ANON_KEY": "supabase_anon_key",
    "LEGAL_AI_LOCALE": "locale",
    "LEGAL_AI_READINESS_THRESHOLD": "readiness_threshold",
    "LEGAL_AI_TIMEOUT": "request_timeout",
    "LEGAL_AI_GENERATION_DELAY": "generation_delay",
    "LEGAL_AI_REQUIRE_SUBSCRIPTION": "require_subscription",
    "LEGAL_AI_STATE_DIR": "state_dir",
}


class Settings(BaseModel):
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    locale: str = "ru"
    # Transcript length (user + assistant messages) at which a typed document counts as ready.
    readiness_threshold: int = 5
    request_timeout: float = 30.0
    generation_delay: float = 2.0
    require_subscription: bool = False
    documents_base_url: str = "/documents"
    state_dir: Path = DEFAULT_STATE_DIR

    @property
    def config_file(self) -> Path:
        return self.state_dir / CONFIG_FILENAME

    @property
    def session_file(self) -> Path:
        return self.state_dir / SESSION_FILENAME

    @property
    def backend_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)

    @classmethod
    def load(cls, config_file: Optional[Path] = None, environ: Optional[dict[str, str]] = None, **overrides: Any) -> "Settings":
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        state_dir = overrides.get("state_dir") or env.get("LEGAL_AI_STATE_DIR")
        path = config_file or (Path(state_dir) if state_dir else DEFAULT_STATE_DIR) / CONFIG_FILENAME
        values.update(load_config_file(path))

        for var, field in ENV_VARS.items():
            if env.get(var):
                values[field] = env[var]

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)


def load_config_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError:
        logger.warning("Ignoring malformed config file %s", path)
        return {}
    return data if isinstance(data, dict) else {}


def save_config_file(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False))
