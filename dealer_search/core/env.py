# dealer_search/core/env.py

import os
from dotenv import load_dotenv

_ENV_FILES = {
	"staging": ".env.staging",
	"prod": ".env.production",
	"production": ".env.production",
}


def _select_env_path() -> str:
	"""Pick the env file: ENV_FILE if set, else by ENV (local / staging / production)."""
	explicit = os.getenv("ENV_FILE")
	if explicit:
		return explicit

	base_dir = os.path.join(os.path.dirname(__file__), "..", "..")
	env_name = os.getenv("ENV", "local").lower()
	return os.path.join(base_dir, _ENV_FILES.get(env_name, ".env"))


# Real environment variables win over values from the file
env_path = _select_env_path()
load_dotenv(env_path, override=False)
