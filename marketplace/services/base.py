"""
Base class for the service layer.

Services raise ``marketplace.exceptions`` for expected failures (invalid body,
missing row, business rule) and let storage errors propagate. ``BaseService``
gives every service a class-named logger and a timing decorator that records
how each call ended.
"""

import logging
import time
from functools import wraps
from typing import Callable

from marketplace.exceptions import MarketplaceException


class BaseService:
    """
    Base class for all services providing common functionality.

    Provides:
    - Logging with class name
    - Performance timing decorator

    Usage:
        class EscrowService(BaseService):
            def __init__(self, escrow_repository, escrow_ratio_service):
                super().__init__()
                self.escrow_repository = escrow_repository

            @BaseService.log_performance
            def create(self, body):
                self.logger.info(f"Creating escrow: {body}")
                # ... implementation
    """

    def __init__(self):
        """Initialize base service with logger."""
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator to log performance of service methods.

        Expected failures (MarketplaceException) are logged as warnings,
        anything else as an error with traceback. Both are re-raised.
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000  # Convert to ms
                self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")
                return result

            except MarketplaceException as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.warning(f"{method_name} failed with {type(e).__name__} '{e.message}' in {elapsed_time:.2f}ms")
                raise

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper
