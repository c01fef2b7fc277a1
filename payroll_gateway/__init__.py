"""
Payroll Gateway - Payroll-Deducted Loan Origination Service

A FastAPI-based microservice that underwrites salary-deducted loans for
employees of registered companies: credit-margin checks, credit score
consultation, approval decisions and installment schedules.
"""

__version__ = "0.1.0"
