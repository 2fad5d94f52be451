"""Testing support – in-memory doubles for the search ports.

Import in your ``conftest.py``::

    from catalog_search.testing.fakes import DictFieldResolver, InMemoryEngineClient
"""
