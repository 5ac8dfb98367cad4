from .validator import validate_wordlists, pretty_summary
from .io import LoadFailure, LANGUAGES, bundled_path, load_words, read_lines

__all__ = ["validate_wordlists", "pretty_summary", "LoadFailure", "LANGUAGES",
           "bundled_path", "load_words", "read_lines"]
