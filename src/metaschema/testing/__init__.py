"""metaschema testing utilities.

Modules:
    fixtures: Pytest fixtures (unknown_keywords, mock_keyword,
              isolated_meta_schema, validation_context).
    mocks: MockKeyword, a keyword that records construction calls and can
           be made to fail.

Example:
    >>> from metaschema.testing import MockKeyword
"""

from metaschema.testing.mocks import MockKeyword

__all__ = ["MockKeyword"]
