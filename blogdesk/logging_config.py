"""Configuración de logging compartida por toda la aplicación."""

import logging


def configure_logging(log_level: str = "INFO") -> None:
    """
    Configura el logger raíz con un único handler de consola.

    Se puede llamar más de una vez: los handlers existentes se reemplazan,
    así crear la app varias veces (tests) no duplica la salida.
    """
    formatter = logging.Formatter(
        fmt='%(asctime)s - %(levelname)s - %(name)s - %(filename)s:%(lineno)d:%(funcName)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).debug(f"Logging inicializado: nivel={log_level}")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
