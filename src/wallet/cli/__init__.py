"""
Command Line Interface Package

The `wallet` console command.

Command Structure:
- wallet: Interactive numbered menu (same as `wallet shell`)
- wallet add/edit/delete: Change the ledger file in one step
- wallet list/totals/stats/categories/breakdown: Reports over the ledger file
- wallet version/config/status: Utility commands

The menu keeps its ledger in memory; nothing is written to disk until
"Save Database" is chosen.
"""
