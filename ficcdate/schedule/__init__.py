# Re-export holiday handler components
from ficcdate.conventions.types import HolidayHandlerType

from .adjustments import (
    BACKWARD_HANDLER,
    FORWARD_HANDLER,
    MODIFIED_FOLLOWING_HANDLER,
    MODIFIED_PRECEDING_HANDLER,
    HANDLERS,
    HolidayHandler,
    adjust_date,
    get_holiday_handler,
    move_by_business_days,
    parse_handler_type,
    roll_backward,
    roll_forward,
)
