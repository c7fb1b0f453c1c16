# argspect — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for argspect."""
import logging

logger: logging.Logger = logging.getLogger("argspect")
