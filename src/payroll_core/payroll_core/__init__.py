"""Payroll Core package.

This package is organized by feature modules (depreciation, leave, payroll,
loans, ...) with pure calculator functions at the bottom and thin
service/repository layers on top for the payroll-run orchestration.
"""
