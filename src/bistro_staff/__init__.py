"""Bistro staff management package.

This package is organized by feature modules (employees, shifts, attendance,
leaves, bonus, payroll, ...) with a thin Flask controller layer on top of
service/repository layers that share one transactional state store.
"""
