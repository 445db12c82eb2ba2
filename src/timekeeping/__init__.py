"""Timekeeping package.

Feature modules (attendance ledger, payroll aggregation, employees) with a thin
Flask controller layer over pure computation and repository layers.
"""
