"""Field bounds and business constants for students."""

MAX_FIRST_NAME_LENGTH = 64
MAX_LAST_NAME_LENGTH = 64
MAX_EMAIL_LENGTH = 256
MAX_PHONE_NUMBER_LENGTH = 20
MAX_ADDRESS_LENGTH = 512

MINIMUM_AGE = 18

# Unique index backing per-tenant email uniqueness
EMAIL_UNIQUE_INDEX = "ix_students_tenant_id_email"

# Public sort names mapped to columns
SORTABLE_FIELDS = {
    "first_name": "first_name",
    "last_name": "last_name",
    "date_of_birth": "date_of_birth",
    "email": "email",
    "phone_number": "phone_number",
    "creation_time": "creation_time",
}
