import enum


class OrderState(str, enum.Enum):
    COLLECTING_INPUT = "collecting_input"
    VALIDATING_DISTANCE = "validating_distance"
    VALIDATING_AVAILABILITY = "validating_availability"
    COMMITTING = "committing"
    DONE = "done"
    REJECTED = "rejected"
