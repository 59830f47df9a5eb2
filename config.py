import os
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def env_int(name: str, default: int, minimum: int = 1) -> int:
    """Read an integer setting from the environment, falling back to the default"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {raw!r}, using default {default}")
        return default
    if value < minimum:
        logger.warning(f"{name}={value} is below {minimum}, using default {default}")
        return default
    return value


def env_flag(name: str, default: bool) -> bool:
    """Read a true/false setting such as CARD_SKIP_FREE_MAIL=yes"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    logger.warning(f"Invalid value for {name}: {raw!r}, using default {default}")
    return default


@dataclass(frozen=True)
class ScannerSettings:
    """Tuning knobs for the business card text extractor"""
    name_scan_lines: int = 10
    company_scan_lines: int = 10
    address_min_length: int = 15
    address_join_lines: int = 3
    address_join_window: int = 6
    # Off by default: jane@gmail.com gives company 'Gmail' and website www.gmail.com
    skip_free_mail: bool = False

    @classmethod
    def from_env(cls) -> "ScannerSettings":
        defaults = cls()
        return cls(
            name_scan_lines=env_int("CARD_NAME_SCAN_LINES", defaults.name_scan_lines),
            company_scan_lines=env_int("CARD_COMPANY_SCAN_LINES", defaults.company_scan_lines),
            address_min_length=env_int("CARD_ADDRESS_MIN_LENGTH", defaults.address_min_length, minimum=0),
            address_join_lines=env_int("CARD_ADDRESS_JOIN_LINES", defaults.address_join_lines, minimum=2),
            address_join_window=env_int("CARD_ADDRESS_JOIN_WINDOW", defaults.address_join_window, minimum=2),
            skip_free_mail=env_flag("CARD_SKIP_FREE_MAIL", defaults.skip_free_mail),
        )
