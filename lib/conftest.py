from typing import Any, Dict

import pytest

from deb822_lossy._lossy.tokens import tokenize_deb822_text


@pytest.fixture(autouse=True)
def doctest_add_tokenizer(doctest_namespace):
    # type: (Dict[str, Any]) -> None
    # Provide names to doctests of modules that cannot import them themselves
    # (deb822_lossy._lossy._util is imported by the tokenizer).
    # - For this to work, the doctests MUST NOT import the names listed here
    #   (as the import would overwrite them)
    doctest_namespace['tokenize_deb822_text'] = tokenize_deb822_text
