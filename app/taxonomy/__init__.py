from functools import lru_cache

from .local_taxonomy import LocalKeywordTaxonomy
from .provider import KeywordTaxonomy


@lru_cache(maxsize=1)
def get_default_taxonomy() -> KeywordTaxonomy:
    return LocalKeywordTaxonomy()


__all__ = ["KeywordTaxonomy", "LocalKeywordTaxonomy", "get_default_taxonomy"]
