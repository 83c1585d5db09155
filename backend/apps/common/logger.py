import logging
import logging.config
from typing import Any, Dict, Mapping, Optional

_configured = False


class AppLogger:
    """Stdlib logger wrapper that carries bound key/value context.

    Bound context is rendered after the message as ``| key=value ...`` so
    cart events stay greppable by ``component`` / ``layer`` / ``item_id``.
    """

    def __init__(
        self,
        name: str,
        context: Optional[Dict[str, Any]] = None,
        _logger: Optional[logging.Logger] = None,
    ):
        self._logger = _logger or logging.getLogger(name)
        self._name = name
        self._context = dict(context or {})

    def bind(self, **extra: Any) -> "AppLogger":
        """Return a child logger whose context also includes ``extra``."""
        return AppLogger(self._name, {**self._context, **extra}, _logger=self._logger)

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, context)

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, context)

    def exception(self, message: str, **context: Any) -> None:
        """Log at ERROR level with the active exception attached."""
        self._log(logging.ERROR, message, context, exc_info=True)

    def _log(
        self,
        level: int,
        message: str,
        context: Mapping[str, Any],
        exc_info: bool = False,
    ) -> None:
        # cart operations log on every mutation; skip formatting when filtered out
        if not self._logger.isEnabledFor(level):
            return
        payload = {**self._context, **context}
        self._logger.log(level, self._format(message, payload), exc_info=exc_info)

    @staticmethod
    def _format(message: str, context: Mapping[str, Any]) -> str:
        if not context:
            return message
        ctx_str = " ".join(
            f"{key}={AppLogger._stringify(value)}" for key, value in context.items()
        )
        return f"{message} | {ctx_str}"

    @staticmethod
    def _stringify(value: Any) -> str:
        if isinstance(value, (str, int, float, bool)) or value is None:
            return str(value)
        return repr(value)


def get_logger(name: str) -> AppLogger:
    return AppLogger(name)


def configure_logging(config: Optional[Dict[str, Any]] = None, force: bool = False) -> bool:
    """Apply the project ``LOGGING`` dictConfig once per process.

    ``config`` defaults to ``cartstate.settings.LOGGING``. Returns ``True``
    when a configuration was applied, ``False`` when it was already done and
    ``force`` was not requested.
    """
    global _configured
    if _configured and not force:
        return False
    if config is None:
        from cartstate import settings

        config = settings.LOGGING
    logging.config.dictConfig(config)
    _configured = True
    get_logger(__name__).bind(component="common", layer="logging").debug(
        "Logging configured", loggers=sorted(config.get("loggers", {}))
    )
    return True
