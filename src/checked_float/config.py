"""
Config — Настройки верификации checked_float

Верификация инвариантов (assert_valid) включена по умолчанию в обычном
режиме интерпретатора и выключена под `python -O`, по аналогии с assert.
Значение можно переопределить переменной окружения CHECKED_FLOAT_VERIFY.

Два уровня:
- глобальная настройка процесса (VerificationSettings, set_verification)
- локальное переопределение verification(), хранимое в ContextVar:
  действует только в текущем потоке / asyncio-задаче

Fallible-пути (try_new, try_from, from_checked) от этой настройки не зависят.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class VerificationSettings(BaseSettings):
    """
    Настройки верификации.

    Загружаются из переменных окружения (prefix: CHECKED_FLOAT_).

    Example:
        >>> settings = VerificationSettings(verify=False)
        >>> settings.verify
        False
    """

    verify: bool = Field(
        default=__debug__,
        description="Check policy invariants on panicking construction and arithmetic",
    )

    model_config = SettingsConfigDict(
        env_prefix="CHECKED_FLOAT_",
        extra="ignore",
    )


_settings = VerificationSettings()

# None — переопределения нет, действует _settings.verify
_override: ContextVar[bool | None] = ContextVar("checked_float_verify", default=None)


def get_settings() -> VerificationSettings:
    """Текущие глобальные настройки."""
    return _settings


def reload_settings() -> VerificationSettings:
    """
    Перечитать настройки из окружения.

    Returns:
        Новый экземпляр настроек (становится глобальным)
    """
    global _settings
    _settings = VerificationSettings()
    logger.info(f"checked_float settings reloaded: verify={_settings.verify}")
    return _settings


def verification_enabled() -> bool:
    """True если инварианты проверяются на panicking-путях в текущем контексте."""
    override = _override.get()
    if override is None:
        return _settings.verify
    return override


def set_verification(enabled: bool) -> None:
    """
    Включить/выключить верификацию инвариантов для всего процесса.

    Изменение глобальное и не синхронизировано: предназначено для
    конфигурации при старте. Для временного изменения используйте verification().

    Args:
        enabled: True — проверять (debug), False — доверять (performance)
    """
    _settings.verify = enabled
    logger.info(f"checked_float verification {'ENABLED' if enabled else 'DISABLED'}")


@contextmanager
def verification(enabled: bool) -> Iterator[None]:
    """
    Временно изменить режим верификации в текущем контексте.

    Переопределение видно только текущему потоку (и asyncio-задаче);
    предыдущее значение восстанавливается при выходе из блока.

    Usage:
        >>> with verification(False):
        ...     pass
    """
    token = _override.set(enabled)
    logger.debug(f"checked_float verification override: {enabled}")
    try:
        yield
    finally:
        _override.reset(token)
