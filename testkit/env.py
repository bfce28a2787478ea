"""Environment loading for testkit.

Centralizes the user config path and dotenv loading. The CLI calls
load_user_env() before reading TestkitConfig.from_env().
"""

from pathlib import Path

from dotenv import load_dotenv

# User config directory (stores .env)
USER_CONFIG_DIR = Path.home() / ".config" / "testkit"


def load_user_env() -> None:
    """Load environment from ${USER_CONFIG_DIR}/.env if present.

    Existing environment variables win over file values.
    """
    load_dotenv(dotenv_path=USER_CONFIG_DIR / ".env")


def load_env(project_dir: Path | None = None) -> None:
    """Load environment from user config and optionally a project directory.

    Args:
        project_dir: Optional directory whose .env is loaded with
            override=True, so project settings beat user settings.
    """
    load_user_env()
    if project_dir is not None:
        load_dotenv(dotenv_path=project_dir / ".env", override=True)
