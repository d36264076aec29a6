from datetime import datetime, timezone


class DateTimeUtil:
    def __init__(self, logger):
        self.logger = logger

    def format_datetime_to_iso_utc_z(self, dt_object: datetime) -> str:
        """
        Formats a datetime object into an ISO 8601 string with milliseconds
        and 'Z' for UTC timezone.

        Args:
            dt_object (datetime): The datetime object to format.

        Returns:
            str: The formatted ISO 8601 datetime string (e.g., "2024-02-05T09:00:00.000Z").

        Raises:
            ValueError: If the dt_object is not a valid datetime or if formatting fails.
        """
        if not isinstance(dt_object, datetime):
            raise ValueError("Input must be a datetime object.")
        try:
            return dt_object.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        except Exception as e:
            self.logger.error(f"Failed to format datetime object: {e}", exc_info=True)
            raise ValueError(f"Failed to format datetime object: {dt_object}.") from e

    def now_iso_utc_z(self) -> str:
        """Return the current UTC time as an ISO 8601 string ending in 'Z'."""
        return self.format_datetime_to_iso_utc_z(datetime.now(timezone.utc))

    def today_iso_date(self) -> str:
        """Return today's UTC date as a zero-padded 'YYYY-MM-DD' string."""
        return datetime.now(timezone.utc).date().isoformat()
