import unittest

from deltaprops import (
    InvalidPropertyValue,
    get_analyze_columns,
    get_checkpoint_interval,
    get_location,
    get_partitioned_by,
    with_analyze_columns,
)


class AccessorTests(unittest.TestCase):
    def test_location(self):
        self.assertIsNone(get_location({}))
        self.assertEqual(
            get_location({"location": "s3://bucket/path"}), "s3://bucket/path"
        )

    def test_partitioned_by_absent(self):
        self.assertEqual(get_partitioned_by({}), [])
        self.assertEqual(get_partitioned_by({"partitioned_by": None}), [])

    def test_partitioned_by_is_a_copy(self):
        stored = ["year", "month"]
        table_properties = {"partitioned_by": stored}

        result = get_partitioned_by(table_properties)
        result.append("day")

        self.assertEqual(stored, ["year", "month"])

    def test_checkpoint_interval(self):
        self.assertIsNone(get_checkpoint_interval({}))
        for value in [1, 10, 2**62]:
            self.assertEqual(
                get_checkpoint_interval({"checkpoint_interval": value}), value
            )

    def test_checkpoint_interval_not_positive(self):
        for value in [0, -1, -5, -(2**63)]:
            with self.assertRaises(InvalidPropertyValue) as cm:
                get_checkpoint_interval({"checkpoint_interval": value})
            self.assertEqual(cm.exception.property_name, "checkpoint_interval")
            self.assertEqual(cm.exception.error_code, "INVALID_TABLE_PROPERTY")
            self.assertEqual(
                str(cm.exception), "checkpoint_interval must be greater than 0"
            )

    def test_analyze_columns(self):
        self.assertIsNone(get_analyze_columns({}))
        columns = {"a", "B"}
        self.assertIs(
            get_analyze_columns({"$trino.analyze_columns": columns}), columns
        )

    def test_with_analyze_columns(self):
        table_properties = {"location": "s3://bucket/path"}

        result = with_analyze_columns(table_properties, ["a", "b", "a"])

        self.assertEqual(get_analyze_columns(result), {"a", "b"})
        self.assertEqual(get_location(result), "s3://bucket/path")
        self.assertNotIn("$trino.analyze_columns", table_properties)

    def test_accessors_do_not_mutate(self):
        table_properties = {
            "location": "s3://bucket/path",
            "partitioned_by": ["year"],
            "checkpoint_interval": 5,
        }
        snapshot = dict(table_properties)

        get_location(table_properties)
        get_partitioned_by(table_properties)
        get_checkpoint_interval(table_properties)
        get_analyze_columns(table_properties)

        self.assertEqual(table_properties, snapshot)


if __name__ == "__main__":
    unittest.main()
