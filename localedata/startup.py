from __future__ import annotations

from typing import Optional

from .core.bundles import LocaleData
from .core.config import Settings, get_settings
from .core.logging_config import get_logger, setup_logging

log = get_logger(__name__)


def init(settings: Optional[Settings] = None, configure_logging: bool = False) -> None:
    """Prepare the process-wide table registry.

    Applications call this once at startup. Importing the package alone
    neither configures logging nor reads any table. With
    ``configure_logging=True`` the root logger's handlers are replaced, so
    only pass it when localedata owns the process logging.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(
            log_file=settings.LOG_FILE,
            level=settings.LOG_LEVEL,
            log_dir=settings.LOG_DIR,
        )
    LocaleData.configure(settings.RESOURCE_PACKAGE)
    if settings.PRELOAD_KINDS:
        LocaleData.preload(settings.PRELOAD_KINDS)
    log.debug("localedata initialised from %s", settings.RESOURCE_PACKAGE)
