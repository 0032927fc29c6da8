"""Salary Processor package.

This package is organized by feature modules (spreadsheet, attendance,
directory, payroll) with a thin Flask controller layer and service/repository
layers underneath.
"""
