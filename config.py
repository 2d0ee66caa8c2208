import os
import logging
from dataclasses import dataclass, field

from services.telegram_client import DEFAULT_API_BASE_URI, DEFAULT_TIMEOUT, TelegramConfig

_logger = logging.getLogger("config")
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
    _logger.addHandler(handler)
_logger.setLevel(logging.INFO)

DEFAULT_SURAT_DESA_DIR = "desa/template-surat"
DEFAULT_SURAT_EXPORT_DESA_DIR = "desa/template-surat/export"
DEFAULT_TEMPLATE_SURAT_DIR = "template-surat"
DEFAULT_REPORT_CSS_PATH = "assets/css/report.css"


@dataclass
class AppConfig:
    """Application configuration loaded from the environment."""

    surat_desa_dir: str = DEFAULT_SURAT_DESA_DIR
    surat_export_desa_dir: str = DEFAULT_SURAT_EXPORT_DESA_DIR
    template_surat_dir: str = DEFAULT_TEMPLATE_SURAT_DIR
    report_css_path: str = DEFAULT_REPORT_CSS_PATH
    wkhtmltopdf_path: str = "wkhtmltopdf"
    default_font: str = "Arial"
    telegram: TelegramConfig = field(default_factory=TelegramConfig)
    telegram_chat_id: str | None = None


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        raise EnvironmentError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise EnvironmentError(f"{name} must be positive, got {raw!r}")
    return value


def get_app_config() -> AppConfig:
    """Load and validate application configuration from environment variables."""

    surat_desa_dir = os.getenv("LOKASI_SURAT_DESA", DEFAULT_SURAT_DESA_DIR)
    surat_export_desa_dir = os.getenv(
        "LOKASI_SURAT_EXPORT_DESA", DEFAULT_SURAT_EXPORT_DESA_DIR
    )
    template_surat_dir = os.getenv("TEMPLATE_SURAT_DIR", DEFAULT_TEMPLATE_SURAT_DIR)
    report_css_path = os.getenv("REPORT_CSS_PATH", DEFAULT_REPORT_CSS_PATH)
    wkhtmltopdf_path = os.getenv("WKHTMLTOPDF_PATH", "wkhtmltopdf")
    default_font = os.getenv("PDF_DEFAULT_FONT", "").strip() or "Arial"

    token = os.getenv("TELEGRAM_TOKEN") or None
    api_base_uri = (
        os.getenv("TELEGRAM_API_BASE_URI") or DEFAULT_API_BASE_URI
    ).rstrip("/")
    timeout = _float_from_env("TELEGRAM_TIMEOUT", DEFAULT_TIMEOUT)
    chat_id = os.getenv("TELEGRAM_CHAT_ID") or None

    _logger.info("LOKASI_SURAT_DESA=%s", surat_desa_dir)
    _logger.info("LOKASI_SURAT_EXPORT_DESA=%s", surat_export_desa_dir)
    _logger.info("WKHTMLTOPDF_PATH=%s", wkhtmltopdf_path)
    _logger.info("TELEGRAM_TOKEN present=%s", bool(token))

    return AppConfig(
        surat_desa_dir=surat_desa_dir,
        surat_export_desa_dir=surat_export_desa_dir,
        template_surat_dir=template_surat_dir,
        report_css_path=report_css_path,
        wkhtmltopdf_path=wkhtmltopdf_path,
        default_font=default_font,
        telegram=TelegramConfig(token=token, api_base_uri=api_base_uri, timeout=timeout),
        telegram_chat_id=chat_id,
    )
