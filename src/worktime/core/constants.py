"""Constants and defaults.

Note: Keep messages here so services and tests agree on the wording.
"""

EMPLOYEE_NOT_FOUND_MESSAGE = "Employee is not registered"
ALREADY_AT_WORK_MESSAGE = "Employee is already at work"
ABSENT_EMPLOYEE_MESSAGE = "Employee has not clocked in today"

YEAR_MONTH_FORMAT = "%Y-%m"
