"""
Test Suite for Wallet

Test Structure:
- fixtures/: Shared test data and utilities
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and configuration tests through click's CliRunner
- e2e/: Tests running the wallet command in a subprocess

Test Data:
All test data is synthetic.
"""
