import logging
import random
from pathlib import Path
from typing import Optional
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from gimmefive.words.catalog import WordCatalog

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

class Settings(BaseModel):
    words_path: Optional[Path] = None   # Defaults to the bundled list
    seed: Optional[int] = None          # None = seed from OS entropy
    log_file: Optional[Path] = None
    verbose: bool = False

    @property
    def log_level(self) -> int:
        return logging.INFO if self.verbose else logging.WARNING

def configure_logging(settings: Settings) -> logging.Handler:
    """
    Routes logs to a file when one is given, otherwise to stderr via rich.
    """
    if settings.log_file:
        handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("gimmefive")
    root.setLevel(settings.log_level)
    root.handlers = [handler]
    root.propagate = False
    return handler

def build_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)

def load_catalog(settings: Settings) -> WordCatalog:
    if settings.words_path:
        return WordCatalog.from_file(settings.words_path)
    return WordCatalog.load_default()
