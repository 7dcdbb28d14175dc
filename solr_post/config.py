from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.host_config import get_hostname_settings_file

DEFAULT_FILE_EXTENSIONS = (
    "xml,json,jsonl,csv,pdf,doc,docx,ppt,pptx,xls,xlsx,"
    "odt,odp,ods,ott,otp,ots,rtf,htm,html,txt,log"
)


class Settings(BaseSettings):
    # Solr server
    host: str = "localhost"
    port: int = 8983
    collection: str = "collection1"
    update_url: Optional[str] = None

    # Upload pipeline
    concurrency: int = 8  # Maximum number of concurrent upload requests
    file_extensions: str = DEFAULT_FILE_EXTENSIONS  # Comma separated, e.g. "html,txt"
    request_timeout_seconds: float = 30.0
    commit_after_upload: bool = True
    upload_chunk_size_kb: int = 256

    # Logging konfiguration
    log_level: str = "INFO"
    log_file_path: str = ""  # Empty disables the file handler
    log_retention_days: int = 7

    model_config = SettingsConfigDict(
        env_prefix="SOLR_POST_",
        env_file=get_hostname_settings_file(),
        extra="ignore",
    )

    @property
    def file_extension_list(self) -> List[str]:
        return [part.strip() for part in self.file_extensions.split(",") if part.strip()]

    @property
    def log_directory(self) -> Optional[Path]:
        """Returns the log directory, or None when file logging is disabled"""
        if not self.log_file_path:
            return None
        return Path(self.log_file_path).parent

    @property
    def config_file_info(self) -> dict:
        """Return information about which configuration file is being used."""
        from .utils.host_config import get_hostname, list_all_settings_files

        return {
            "hostname": get_hostname(),
            "active_config_file": get_hostname_settings_file(),
            "all_available_configs": list_all_settings_files(),
        }
