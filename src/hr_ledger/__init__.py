"""HR ledger package.

Organized by feature modules (employees, attendance, payroll, ledger, ...)
with a thin Flask controller layer over service/repository layers and a
single record store that owns all application state.
"""
