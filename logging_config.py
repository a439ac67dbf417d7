import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(service_name: str,
                  log_dir: Optional[Union[str, Path]] = None,
                  level: Union[str, int] = "INFO") -> logging.Logger:
    """
    Настраивает логирование для указанного сервиса.

    Всегда добавляет вывод в консоль. Если указан log_dir, дополнительно пишет
    в {log_dir}/{service_name}.log с ротацией по размеру.

    :param service_name: Имя сервиса (строка), оно же имя логгера
    :param log_dir: Папка для файлов логов или None
    :param level: Уровень логирования (имя или число)
    :return: Логгер для сервиса
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    # Очищаем существующие хендлеры, чтобы повторный вызов не дублировал вывод
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_dir is not None:
        logs_dir = Path(log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True, mode=0o755)

        service_handler = RotatingFileHandler(
            str(logs_dir / f'{service_name}.log'),
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        service_handler.setFormatter(formatter)
        service_handler.setLevel(level)
        logger.addHandler(service_handler)

    return logger
