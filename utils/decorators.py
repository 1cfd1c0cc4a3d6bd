"""
Decorators for the dice bot commands

Removes logging boilerplate from prefix command handlers.
"""
import inspect
from functools import wraps
from typing import List, Optional

from utils.logging import get_contextual_logger, set_command_context


def logged_command(
    command_name: Optional[str] = None,
    log_params: bool = True,
    exclude_params: Optional[List[str]] = None
):
    """
    Decorator for prefix commands that adds start/complete/failed logging.

    Args:
        command_name: Override command name (defaults to "!" + function name)
        log_params: Whether to log command parameters (default: True)
        exclude_params: Parameter names to keep out of the logs

    Example:
        @commands.command(name="roll")
        @logged_command("!roll")
        async def roll(self, ctx, *, expression: str | None = None):
            ...

    Requirements:
        - Function must be an async method with (self, ctx, ...) signature
        - Exceptions are logged and re-raised for the bot's error handler
    """
    def decorator(func):
        signature = inspect.signature(func)
        skipped = set(list(signature.parameters.keys())[:2])  # self, ctx

        @wraps(func)
        async def wrapper(self, ctx, *args, **kwargs):
            cmd_name = command_name or f"!{func.__name__}"

            context = {"command": cmd_name}
            if log_params:
                exclude_set = skipped | set(exclude_params or [])
                bound = signature.bind_partial(self, ctx, *args, **kwargs)
                for name, value in bound.arguments.items():
                    if name not in exclude_set:
                        context[f"param_{name}"] = value

            set_command_context(ctx=ctx, **context)

            logger = getattr(self, 'logger', None) or get_contextual_logger(
                f'{self.__class__.__module__}.{self.__class__.__name__}'
            )
            trace_id = logger.start_operation(f"{func.__name__}_command")

            try:
                logger.info(f"{cmd_name} command started")
                result = await func(self, ctx, *args, **kwargs)
                logger.info(f"{cmd_name} command completed successfully")
                logger.end_operation(trace_id, "completed")
                return result
            except Exception as e:
                logger.error(f"{cmd_name} command failed", error=e)
                logger.end_operation(trace_id, "failed")
                raise

        # Preserve signature for discord.py command registration
        wrapper.__signature__ = signature  # type: ignore
        return wrapper
    return decorator
