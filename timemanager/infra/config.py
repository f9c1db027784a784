"""
Configuration for the dashboard core, built on pydantic-settings.

Sources, lowest priority first: field defaults, a YAML preferences file,
then TIMEMANAGER_* environment variables (or a .env file).

Directories are resolved but not created up front: the data directory only
matters for the default SQLite file, the config directory only on save.
"""

import os
from pathlib import Path
from typing import Optional
import yaml

from pydantic_settings import BaseSettings, SettingsConfigDict
from timemanager.domain.models import UserPreferences

DB_FILENAME = "timemanager.db"
PREFERENCES_FILENAME = "settings.yaml"


def platform_base_dir(kind: str, system: Optional[str] = None) -> Path:
    """
    Per-user base directory for 'config' or 'data' files.

    On Windows this is %APPDATA%, or ~/AppData/Roaming when the variable
    is not set; elsewhere the XDG defaults under the home directory.
    """
    if (system or os.name) == 'nt':
        appdata = os.getenv('APPDATA')
        return Path(appdata) if appdata else Path.home() / 'AppData' / 'Roaming'
    if kind == 'config':
        return Path.home() / '.config'
    return Path.home() / '.local' / 'share'


class Settings(BaseSettings):
    """
    Dashboard settings: where state lives and the user preferences.
    """
    model_config = SettingsConfigDict(
        env_prefix='TIMEMANAGER_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    app_name: str = "TimeManager"
    config_dir: Optional[Path] = None
    data_dir: Optional[Path] = None

    # Storage: a SQLAlchemy URL, or "memory" for a non-durable session
    database_url: Optional[str] = None

    preferences: UserPreferences = UserPreferences()

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.config_dir is None:
            self.config_dir = platform_base_dir('config') / self.app_name.lower()
        if self.data_dir is None:
            self.data_dir = platform_base_dir('data') / self.app_name.lower()
        self._load_yaml_config()

    def preferences_file(self) -> Path:
        """Workspace config/settings.yaml wins over the per-user one"""
        local = Path("config") / PREFERENCES_FILENAME
        if local.exists():
            return local
        return self.config_dir / PREFERENCES_FILENAME

    def _load_yaml_config(self):
        config_file = self.preferences_file()
        if not config_file.exists():
            return
        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)
        if config_data:
            self.preferences = UserPreferences(**config_data)

    def save_preferences(self) -> Path:
        """Write the preferences to the per-user YAML file and return its path"""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        config_file = self.config_dir / PREFERENCES_FILENAME
        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(self.preferences.model_dump(), f, default_flow_style=False)
        return config_file

    def get_db_url(self) -> str:
        """The configured URL, or a SQLite file in the data directory"""
        if self.database_url:
            return self.database_url

        self.data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{self.data_dir / DB_FILENAME}"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Process-wide settings, loaded on first use"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
