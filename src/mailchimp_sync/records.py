"""Read contact records from a relational database."""

import enum
import logging
from dataclasses import dataclass

from sqlalchemy import create_engine, exc

from mailchimp_sync.exceptions import DatabaseConnectionError, QueryError, RowReadError, SchemaError

logger = logging.getLogger(__name__)

DEFAULT_QUERY = "SELECT firstname, lastname, email FROM members"


@dataclass(frozen=True)
class Record:
    """One contact extracted from the data source."""

    email_address: str
    first_name: str = ""
    last_name: str = ""


def _to_text(value, column):
    if value is None:
        return None
    if isinstance(value, bytes | bytearray):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as err:
            raise RowReadError(f"Column {column!r} is not valid UTF-8") from err
    return str(value)


class QueryShape(enum.Enum):
    """Layout of the query result, determined by its number of columns."""

    EMAIL_ONLY = 1
    FULL_NAME = 3

    @classmethod
    def from_columns(cls, columns):
        """Pick the shape matching the result columns."""
        try:
            return cls(len(columns))
        except ValueError:
            raise SchemaError(
                f"Query must return 1 (email) or 3 (first, last, email) columns, got {len(columns)}: "
                f"{', '.join(columns)}"
            ) from None

    def decode(self, row) -> Record:
        """
        Build a record from a row under this shape.

        A row whose length differs from the shape is rejected, as is a row with
        an empty email. NULL names are read as empty.
        """
        if len(row) != self.value:
            raise RowReadError(f"Expected {self.value} values in row, got {len(row)}")

        if self is QueryShape.EMAIL_ONLY:
            first_name, last_name, email = None, None, _to_text(row[0], "email")
        else:
            first_name, last_name, email = (
                _to_text(value, column) for value, column in zip(row, ("first name", "last name", "email"))
            )

        if not email:
            raise RowReadError(f"Row {tuple(row)!r} has no email address")
        return Record(email_address=email, first_name=first_name or "", last_name=last_name or "")


def fetch_records(connection_string: str, query: str = DEFAULT_QUERY) -> list[Record]:
    """
    Execute `query` against the database and return every row as a record.

    Args:
        connection_string: SQLAlchemy database URL
        query: SQL returning either (email) or (first name, last name, email)

    Returns:
        list[Record]: One record per row, in result order

    Raises:
        DatabaseConnectionError: If the URL is invalid or the database is unreachable
        QueryError: If the query fails or returns no result set
        SchemaError: If the query returns neither 1 nor 3 columns
        RowReadError: If a row cannot be decoded

    """
    try:
        engine = create_engine(connection_string)
    except (exc.ArgumentError, ImportError) as err:
        raise DatabaseConnectionError(f"Invalid database connection string: {err}") from err

    try:
        try:
            connection = engine.connect()
        except exc.SQLAlchemyError as err:
            raise DatabaseConnectionError(f"Could not connect to the database: {err}") from err

        with connection:
            try:
                # Run the query verbatim, drivers must not interpolate literal "%" signs.
                result = connection.execution_options(no_parameters=True).exec_driver_sql(query)
            except exc.SQLAlchemyError as err:
                raise QueryError(f"Error whilst executing query: {err}") from err

            try:
                if not result.returns_rows:
                    raise QueryError("Query did not return any result set")
                shape = QueryShape.from_columns(list(result.keys()))
                logger.debug("Decoding query result as %s", shape.name)

                try:
                    records = [shape.decode(row) for row in result]
                except exc.SQLAlchemyError as err:
                    raise RowReadError(f"Error retrieving rows from database: {err}") from err
            finally:
                result.close()
    finally:
        engine.dispose()

    logger.info("Fetched %d records", len(records))
    return records
