"""Student SQL query constants.

Queries are parameterized by ``{schema}``. Tenant scoping uses
``IS NOT DISTINCT FROM`` so the host scope (NULL tenant) matches exactly.
"""


STUDENT_INSERT = """
    INSERT INTO {schema}.students (
        id, tenant_id, first_name, last_name, date_of_birth, email, phone_number,
        address, concurrency_stamp, creation_time, creator_id
    ) VALUES (
        $1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11
    ) RETURNING *
"""

STUDENT_UPDATE = """
    UPDATE {schema}.students SET
        first_name = $3,
        last_name = $4,
        date_of_birth = $5,
        email = $6,
        phone_number = $7,
        address = $8,
        concurrency_stamp = $9,
        last_modification_time = $10,
        last_modifier_id = $11
    WHERE id = $1 AND tenant_id IS NOT DISTINCT FROM $2 AND is_deleted = false
    RETURNING *
"""

STUDENT_SOFT_DELETE = """
    UPDATE {schema}.students SET
        is_deleted = true,
        deleter_id = $3,
        deletion_time = $4,
        concurrency_stamp = $5
    WHERE id = $1 AND tenant_id IS NOT DISTINCT FROM $2 AND is_deleted = false
"""

STUDENT_GET_BY_ID = """
    SELECT * FROM {schema}.students
    WHERE id = $1 AND tenant_id IS NOT DISTINCT FROM $2 AND is_deleted = false
"""

STUDENT_GET_BY_EMAIL = """
    SELECT * FROM {schema}.students
    WHERE email = $1
      AND tenant_id IS NOT DISTINCT FROM $2
      AND is_deleted = false
      AND ($3::uuid IS NULL OR id <> $3::uuid)
    LIMIT 1
"""

# Base predicate for list/count; $1 is the tenant
STUDENT_LIST_WHERE = "tenant_id IS NOT DISTINCT FROM $1 AND is_deleted = false"

# Name filter; $2 is an ILIKE pattern
STUDENT_NAME_FILTER = "(first_name ILIKE $2 OR last_name ILIKE $2)"

STUDENT_LIST_PAGINATED = """
    SELECT * FROM {schema}.students
    WHERE {where}
    ORDER BY {order_by}
    LIMIT ${limit_param} OFFSET ${offset_param}
"""

STUDENT_COUNT = """
    SELECT COUNT(*) FROM {schema}.students
    WHERE {where}
"""
