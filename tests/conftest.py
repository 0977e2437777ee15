"""
Pytest configuration and fixtures for arith tests.
"""

import pytest

from arith.lexer    import Lexer
from arith.parser   import parse
from arith.reporter import Reporter


@pytest.fixture
def reporter():
    """Provide a Reporter with no source attached."""
    return Reporter()


@pytest.fixture
def pretty():
    """Parse a source string and render its root in prefix form."""
    def render(source):
        return parse(Lexer(source)).pprint(source)
    return render
