"""Worktime package.

Employee attendance tracking organized by feature modules (employees, teams,
worktime) with a service layer over repository interfaces.
"""
