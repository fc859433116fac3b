"""fixturelink - cross-source football fixture reconciliation."""
