import logging
from datetime import datetime

from config import AppConfig, get_app_config
from models.document import RenderResult
from services.telegram_client import (
    CouldNotSendNotification,
    TelegramClient,
    build_telegram_client,
)

logger = logging.getLogger(__name__)


def send_alert(text: str, cfg: AppConfig | None = None, client: TelegramClient | None = None) -> bool:
    """Send ``text`` to the configured chat, or just log it when unconfigured.

    Returns ``True`` only when Telegram accepted the message.
    """

    cfg = cfg or get_app_config()
    if not (cfg.telegram.token and cfg.telegram_chat_id):
        logger.info("%s", text)
        return False

    owned = client is None
    client = client or build_telegram_client(cfg.telegram)
    try:
        client.send_message({"chat_id": cfg.telegram_chat_id, "text": text})
    except CouldNotSendNotification as exc:
        logger.warning("Telegram alert not delivered (%s): %s", exc.code, exc)
        return False
    finally:
        if owned:
            client.close()
    return True


def send_render_alert(
    result: RenderResult, cfg: AppConfig | None = None, client: TelegramClient | None = None
) -> bool:
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    if result.ok:
        msg = f"📄 Surat siap: {result.pdf_path} | {timestamp}"
    else:
        msg = f"⚠️ Gagal membuat PDF, HTML asli disimpan di {result.raw_path} | {timestamp}"
    return send_alert(msg, cfg, client)
