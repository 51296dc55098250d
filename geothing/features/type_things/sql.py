"""SQL of the type thing table."""

from geothing.features.crud.query import EntityDescriptor

LIST_COLUMNS = """id,
       name,
       external_id,
       table_name,
       geometry_type,
       inactivated,
       managed_by,
       icon_path,
       _created_by AS created_by,
       _created_at AS created_at"""

GET_COLUMNS = """id,
       name,
       description,
       comment,
       external_id,
       table_name,
       geometry_type,
       inactivated,
       inactivated_time,
       inactivated_by,
       inactivated_reason,
       managed_by,
       icon_path,
       more_data_schema,
       _created_at AS created_at,
       _created_by AS created_by,
       _last_modified_at AS last_modified_at,
       _last_modified_by AS last_modified_by,
       _deleted AS deleted,
       _deleted_at AS deleted_at,
       _deleted_by AS deleted_by"""

FILTER_COLUMNS = {
    "created_by": "_created_by",
    "external_id": "external_id",
    "inactivated": "inactivated",
}

NULLABLE_FILTER_COLUMNS = frozenset({"external_id"})

TEXT_SEARCH_EXPRESSION = """to_tsvector('french', unaccent({name}) ||
                              ' ' || coalesce(unaccent({description}), ' ') ||
                              ' ' || coalesce(unaccent({comment}), ' '))"""

INSERT_TYPE_THING = """
INSERT INTO {schema}.type_thing
(name, description, comment, external_id, table_name, geometry_type,
 inactivated, inactivated_time, inactivated_by, inactivated_reason,
 managed_by, icon_path, more_data_schema, _created_at, _created_by, text_search)
VALUES ($1, $2, $3, $4, $5, $6,
        $7, $8, $9, $10,
        $11, $12, $13, CURRENT_TIMESTAMP, $14,
        {text_search})
RETURNING id;
"""

UPDATE_TYPE_THING = """
UPDATE {schema}.type_thing SET
       name = $2,
       description = $3,
       comment = $4,
       external_id = $5,
       table_name = $6,
       geometry_type = $7,
       inactivated = $8,
       inactivated_time = $9,
       inactivated_by = $10,
       inactivated_reason = $11,
       managed_by = $12,
       icon_path = $13,
       more_data_schema = $14,
       _last_modified_at = CURRENT_TIMESTAMP,
       _last_modified_by = $15,
       text_search = {text_search}
WHERE id = $1 AND _deleted = false;
"""

COUNT_ALL = "SELECT COUNT(*) FROM {schema}.type_thing WHERE _deleted = false;"


def type_thing_descriptor(schema: str) -> EntityDescriptor:
    """Describe the type thing table of ``schema`` to the query composer."""
    return EntityDescriptor(
        name="type thing",
        table=f"{schema}.type_thing",
        list_columns=LIST_COLUMNS,
        get_columns=GET_COLUMNS,
        filter_columns=FILTER_COLUMNS,
        nullable_filter_columns=NULLABLE_FILTER_COLUMNS,
    )


def insert_type_thing_sql(schema: str) -> str:
    return INSERT_TYPE_THING.format(
        schema=schema,
        text_search=TEXT_SEARCH_EXPRESSION.format(
            name="$1", description="$2", comment="$3"
        ),
    )


def update_type_thing_sql(schema: str) -> str:
    return UPDATE_TYPE_THING.format(
        schema=schema,
        text_search=TEXT_SEARCH_EXPRESSION.format(
            name="$2", description="$3", comment="$4"
        ),
    )


def count_all_sql(schema: str) -> str:
    return COUNT_ALL.format(schema=schema)
