# argvtree Argument Tokenizer — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for the argvtree command line."""
from rich.console import Console

console = Console()
