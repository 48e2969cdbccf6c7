"""Internal constants shared across the library."""

# Number of documented positions in a state-vector row (0..16).
STATE_VECTOR_FIELD_COUNT = 17
