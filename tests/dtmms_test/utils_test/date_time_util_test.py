from unittest import TestCase, main
from unittest.mock import patch, Mock
from datetime import datetime, timezone

from dtmms.utils.date_time_util import DateTimeUtil


class TestDateTimeUtil(TestCase):
    def setUp(self):
        self.logger = Mock()
        self.utils = DateTimeUtil(logger=self.logger)

    def test_format_datetime_to_iso_utc_z(self):
        test_cases = [
            (
                datetime(2023, 10, 27, 10, 30, 45, 123456, tzinfo=timezone.utc),
                "2023-10-27T10:30:45.123Z",
            ),
            (
                datetime(2024, 2, 5, 9, 0, tzinfo=timezone.utc),
                "2024-02-05T09:00:00.000Z",
            ),
        ]
        for dt_object, expected in test_cases:
            with self.subTest(dt_object=dt_object):
                self.assertEqual(
                    self.utils.format_datetime_to_iso_utc_z(dt_object), expected
                )

    def test_format_datetime_to_iso_utc_z_invalid_input(self):
        with self.assertRaises(ValueError):
            self.utils.format_datetime_to_iso_utc_z("2024-02-05")

    def test_now_iso_utc_z(self):
        result = self.utils.now_iso_utc_z()

        self.assertRegex(result, r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")

    @patch("dtmms.utils.date_time_util.datetime")
    def test_today_iso_date(self, mock_datetime):
        mock_datetime.now.return_value = datetime(
            2024, 3, 9, 23, 59, tzinfo=timezone.utc
        )

        self.assertEqual(self.utils.today_iso_date(), "2024-03-09")


if __name__ == "__main__":
    main()
