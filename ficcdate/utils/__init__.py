from .date import (
    add_months,
    add_years,
    date_to_excel,
    datetime_to_str,
    excel_to_date,
    is_end_of_month,
    to_date,
)
