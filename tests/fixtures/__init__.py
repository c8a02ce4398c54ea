"""
Test Fixtures and Utilities

Shared test data and helpers:
- Synthetic ledger transactions and ledger files
- Environment helpers for subprocess tests

All test data is synthetic and does not contain real financial information.
"""
