"""
Enhanced Logging Utilities

Structured logging with command context for the dice bot.
Hybrid approach: human-readable console + structured JSON files.
"""
import contextvars
import json
import logging
import time
import uuid
from datetime import datetime
from typing import Any, Dict, Optional, Union

# Context variable for request tracking across async calls
log_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar('log_context', default={})

JSONValue = Union[str, int, float, bool, None, dict[str, Any], list[Any]]

# Attributes every LogRecord carries; anything else came from `extra`
_RECORD_ATTRIBUTES = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName', 'taskName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info'
}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured file logging."""

    def format(self, record) -> str:
        """Format log record as one JSON line with context information."""
        log_obj: dict[str, JSONValue] = {
            'timestamp': datetime.now().isoformat() + 'Z',
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_obj['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else 'Unknown',
                'message': str(record.exc_info[1]) if record.exc_info[1] else 'No message',
                'traceback': self.formatException(record.exc_info)
            }

        context = log_context.get({})
        if context:
            log_obj['context'] = context.copy()
            if 'trace_id' in context:
                log_obj['trace_id'] = context['trace_id']

        extra_data = {}
        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRIBUTES:
                continue
            try:
                json.dumps(value)
                extra_data[key] = value
            except (TypeError, ValueError):
                extra_data[key] = str(value)

        if extra_data:
            log_obj['extra'] = extra_data

        return json.dumps(log_obj, ensure_ascii=False)


class ContextualLogger:
    """
    Logger wrapper that adds keyword context and operation timing.

    Keyword arguments passed to the log methods end up in the record's `extra`
    and are written out by JSONFormatter.
    """

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)
        self._start_time: Optional[float] = None

    def start_operation(self, operation_name: Optional[str] = None) -> str:
        """
        Start timing an operation and generate a trace ID.

        Returns:
            Generated trace ID for this operation
        """
        self._start_time = time.time()
        trace_id = str(uuid.uuid4())[:8]

        current_context = log_context.get({}).copy()
        current_context['trace_id'] = trace_id
        if operation_name:
            current_context['operation'] = operation_name
        log_context.set(current_context)

        return trace_id

    def end_operation(self, trace_id: str, operation_result: str = "completed") -> None:
        """Log the final duration of an operation and drop its context."""
        if self._start_time is None:
            self.warning("end_operation called without corresponding start_operation")
            return

        duration_ms = int((time.time() - self._start_time) * 1000)
        self.logger.info(f"Operation {operation_result}", extra={
            'trace_id': trace_id,
            'final_duration_ms': duration_ms,
            'operation_result': operation_result,
        })

        current_context = log_context.get({}).copy()
        current_context.pop('operation', None)
        if current_context.get('trace_id') == trace_id:
            current_context.pop('trace_id')
        log_context.set(current_context)

        self._start_time = None

    def _with_duration(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        if self._start_time is not None:
            kwargs['duration_ms'] = int((time.time() - self._start_time) * 1000)
        return kwargs

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, extra=self._with_duration(kwargs))

    def info(self, message: str, **kwargs):
        self.logger.info(message, extra=self._with_duration(kwargs))

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, extra=self._with_duration(kwargs))

    def error(self, message: str, error: Optional[Exception] = None, **kwargs):
        """
        Log error message with context and exception information.

        Args:
            message: Error message
            error: Optional exception object; adds its type/message and traceback
            **kwargs: Additional context
        """
        kwargs = self._with_duration(kwargs)
        if error:
            kwargs['error'] = {
                'type': type(error).__name__,
                'message': str(error)
            }
            self.logger.error(message, exc_info=error, extra=kwargs)
        else:
            self.logger.error(message, extra=kwargs)


def set_command_context(
    ctx: Optional[Any] = None,
    user_id: Optional[Union[str, int]] = None,
    guild_id: Optional[Union[str, int]] = None,
    channel_id: Optional[Union[str, int]] = None,
    command: Optional[str] = None,
    **additional_context
):
    """
    Set Discord command context for logging.

    Args:
        ctx: Command context (user/guild/channel are taken from it)
        user_id: Discord user ID
        guild_id: Discord guild ID
        channel_id: Discord channel ID
        command: Command name (e.g., '!roll')
        **additional_context: Any additional context to include
    """
    context = log_context.get({}).copy()

    if ctx is not None:
        context['user_id'] = str(ctx.author.id)
        context['username'] = str(ctx.author.name)
        if getattr(ctx, 'guild', None):
            context['guild_id'] = str(ctx.guild.id)
        if getattr(ctx, 'channel', None):
            context['channel_id'] = str(ctx.channel.id)

    if user_id:
        context['user_id'] = str(user_id)
    if guild_id:
        context['guild_id'] = str(guild_id)
    if channel_id:
        context['channel_id'] = str(channel_id)
    if command:
        context['command'] = command

    context.update(additional_context)
    log_context.set(context)


def clear_context():
    """Clear the current logging context."""
    log_context.set({})


def get_contextual_logger(logger_name: str) -> ContextualLogger:
    """Get a contextual logger instance (typically named after __name__)."""
    return ContextualLogger(logger_name)
