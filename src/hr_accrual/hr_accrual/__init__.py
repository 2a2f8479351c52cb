"""HR accrual package.

Feature modules (leave, attendance, reports, ...) keep the pure calculations
apart from the service/repository layers that feed them fetched records.
"""
