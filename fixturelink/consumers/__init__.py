"""Consumers: fixture matching and batch reconciliation.

Import from the submodules directly:
    from fixturelink.consumers.matching import reconcile
    from fixturelink.consumers.reconciliation import reconcile_fixtures
"""
