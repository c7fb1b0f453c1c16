# argspect — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for argspect output."""
from rich.console import Console

console = Console(color_system="auto")
