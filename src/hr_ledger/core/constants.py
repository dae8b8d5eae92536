"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Financial year order used by the payment and month-wise summaries.
FISCAL_MONTHS = MONTHS[3:] + MONTHS[:3]

DEFAULT_MONTH = "April"

# Salary is always prorated over 30 days, whatever the month length.
SALARY_DAY_DIVISOR = 30

DEFAULT_ALLOWED_LEAVE = 1
DEFAULT_HOLIDAY_COUNT = 4

DEFAULT_GST_RATE = 18.0

# Storage keys of the six persisted collections.
COMPANY_PROFILE_KEY = "company_profile"
EMPLOYEES_KEY = "employees_data"
ATTENDANCE_KEY = "attendance_data"
SALARIES_KEY = "salary_data"
HOLIDAYS_KEY = "holidays_data"
TRANSACTIONS_KEY = "transactions_data"
