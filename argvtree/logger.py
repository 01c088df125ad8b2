# argvtree Argument Tokenizer — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for argvtree."""
import logging

logger: logging.Logger = logging.getLogger("argvtree")
