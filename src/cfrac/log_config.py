"""
Настройка логирования для приложений, использующих cfrac.

Библиотека сама обработчики не настраивает и пишет только DEBUG-сообщения
в логгеры "cfrac.*". Этот модуль подключает их к stdout.
"""

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, format_string: str = DEFAULT_FORMAT) -> None:
    """
    Базовая настройка логирования в stdout.

    Args:
        level: Уровень корневого логгера и логгера "cfrac"
        format_string: Формат сообщений для logging.basicConfig
    """
    logging.basicConfig(level=level, format=format_string, stream=sys.stdout)
    logging.getLogger("cfrac").setLevel(level)
