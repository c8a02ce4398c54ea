#!/usr/bin/env python3
"""
End-to-end tests for the wallet package.

These tests run the wallet CLI via subprocess against temporary data
directories, using synthetic ledger data.
"""
