import logging
from rich.console import Console
from rich.logging import RichHandler

def init(level: str = "WARNING"):
    """Configure root logger once per run."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(name)s | %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
