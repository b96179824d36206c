import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Host call addressing (waPC binding / namespace)
    host_binding: str = Field(
        default="kubewarden", validation_alias="OCI_VERIFY_HOST_BINDING"
    )
    host_namespace: str = Field(
        default="oci", validation_alias="OCI_VERIFY_HOST_NAMESPACE"
    )

    # HTTP 経由で検証ホストを呼び出す場合の接続先
    host_url: str = Field(
        default="http://localhost:3000", validation_alias="OCI_VERIFY_HOST_URL"
    )
    # 検証ホストの応答待ちタイムアウト（秒）
    host_timeout_seconds: float = Field(
        default=30.0, validation_alias="OCI_VERIFY_HOST_TIMEOUT_SECONDS"
    )

    # Application Configuration
    log_level: str = Field(default="INFO", validation_alias="OCI_VERIFY_LOG_LEVEL")


def configure_logging(level: str | None = None) -> None:
    """ログ出力を設定する。level 未指定時は settings.log_level を使う。"""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
    logger.debug("logging configured at %s", level_name)


settings = Settings()
