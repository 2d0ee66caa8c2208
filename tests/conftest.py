import pytest

from analytics_tracker import reset_counters
from config import AppConfig

_ENV_VARS = (
    "LOKASI_SURAT_DESA",
    "LOKASI_SURAT_EXPORT_DESA",
    "TEMPLATE_SURAT_DIR",
    "REPORT_CSS_PATH",
    "WKHTMLTOPDF_PATH",
    "PDF_DEFAULT_FONT",
    "TELEGRAM_TOKEN",
    "TELEGRAM_API_BASE_URI",
    "TELEGRAM_TIMEOUT",
    "TELEGRAM_CHAT_ID",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_counters()


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    css = tmp_path / "report.css"
    css.write_text("p { margin: 0; }", encoding="utf-8")
    return AppConfig(
        surat_desa_dir=str(tmp_path / "desa" / "template-surat"),
        surat_export_desa_dir=str(tmp_path / "desa" / "export"),
        template_surat_dir=str(tmp_path / "template-surat"),
        report_css_path=str(css),
    )
