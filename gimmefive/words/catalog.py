import logging
from pathlib import Path
from typing import Iterable
from gimmefive.errors import CatalogError, CatalogTooSmallError, EmptyCatalogError, InvariantViolation

logger = logging.getLogger(__name__)

WORD_LENGTH = 5
DEFAULT_WORDS_PATH = Path(__file__).resolve().parent.parent / "data" / "words.txt"

def is_candidate(word: str) -> bool:
    return len(word) == WORD_LENGTH and word.isascii() and word.isalpha()

class WordCatalog:
    """
    Fixed, ordered list of five-letter words available for drawing.
    """

    def __init__(self, words: Iterable[str], source: str = "<memory>"):
        self._words = tuple(words)
        self.source = source

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: str = "<memory>"):
        # Keeps file order and duplicates
        words = []
        for line in lines:
            word = line.strip()
            if is_candidate(word):
                words.append(word.lower())
        return cls(words, source=source)

    @classmethod
    def from_text(cls, text: str, source: str = "<memory>"):
        return cls.from_lines(text.splitlines(), source=source)

    @classmethod
    def from_file(cls, path: Path):
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogError(f"Could not read word list {path}: {e}") from e
        catalog = cls.from_text(text, source=str(path))
        logger.debug(f"Loaded {len(catalog)} words from {path}")
        return catalog

    @classmethod
    def load_default(cls):
        return cls.from_file(DEFAULT_WORDS_PATH)

    def __len__(self) -> int:
        return len(self._words)

    def size(self) -> int:
        return len(self._words)

    def word_at(self, index: int) -> str:
        if not 0 <= index < len(self._words):
            raise InvariantViolation(f"Word index {index} outside [0, {len(self._words)})")
        return self._words[index]

    def words(self) -> tuple[str, ...]:
        return self._words

    def require_round_size(self, round_size: int) -> None:
        """
        Rejects catalogs that can never fill a round.
        """
        if not self._words:
            raise EmptyCatalogError(f"No five-letter words found in {self.source}")
        if len(self._words) < round_size:
            raise CatalogTooSmallError(
                f"{self.source} has {len(self._words)} five-letter words, need at least {round_size}"
            )
