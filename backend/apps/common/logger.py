import logging
from typing import Any, Dict, Mapping, Optional


class AppLogger:
    """Stdlib logger wrapper carrying an immutable set of ``key=value`` context.

    ``bind`` never mutates the receiver, so a module-level logger can be
    specialised per view or service without leaking context between them.
    """

    def __init__(
        self,
        name: str,
        context: Optional[Mapping[str, Any]] = None,
        _logger: Optional[logging.Logger] = None,
    ):
        self._logger = _logger or logging.getLogger(name)
        self._name = name
        self._context: Dict[str, Any] = dict(context or {})

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def bind(self, **extra: Any) -> "AppLogger":
        return AppLogger(self._name, {**self._context, **extra}, _logger=self._logger)

    def unbind(self, *keys: str) -> "AppLogger":
        remaining = {k: v for k, v in self._context.items() if k not in keys}
        return AppLogger(self._name, remaining, _logger=self._logger)

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, context)

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, context)

    def exception(self, message: str, **context: Any) -> None:
        """Log at ERROR level with the active exception's traceback."""
        self._log(logging.ERROR, message, context, exc_info=True)

    def _log(
        self,
        level: int,
        message: str,
        context: Dict[str, Any],
        *,
        exc_info: bool = False,
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        payload = {**self._context, **context}
        self._logger.log(level, self.render(message, payload), exc_info=exc_info)

    @staticmethod
    def render(message: str, context: Mapping[str, Any]) -> str:
        if not context:
            return message
        pairs = " ".join(
            f"{key}={AppLogger._stringify(value)}" for key, value in context.items()
        )
        return f"{message} | {pairs}"

    @staticmethod
    def _stringify(value: Any) -> str:
        if isinstance(value, (str, int, float, bool)) or value is None:
            return str(value)
        return repr(value)


def get_logger(name: str) -> AppLogger:
    return AppLogger(name)
