"""Fleet Attendance package.

This package is organized by feature modules (drivers, attendance, imports,
legacy, ...) with a thin Flask controller layer and service/repository layers.
"""
