"""HRMS System package.

This package is organized by feature modules (companies, employees, licenses,
leaves, payroll, ...) with a thin Flask controller layer over service and
repository layers. Repositories come in an in-memory and a MySQL flavour.
"""
