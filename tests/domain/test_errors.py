import unittest

from src.tensornn.domain._errors import (
    ChannelMismatchError,
    ElementCountMismatchError,
    InvalidRankError,
    PreconditionError,
    ShapeMismatchError,
    UnsupportedKernelSizeError,
    UnsupportedStrideError,
)


class TestPreconditionErrors(unittest.TestCase):
    def test_all_errors_are_precondition_and_value_errors(self):
        errors = [
            ChannelMismatchError(3, 4),
            ElementCountMismatchError((2, 2), 3),
            InvalidRankError("input", 3, 2),
            ShapeMismatchError("add", (2,), (3,)),
            UnsupportedKernelSizeError("kernel_size[2]", 2, "!= 1 is not supported"),
            UnsupportedStrideError("strides[2]", 2, "!= 1 is not supported"),
        ]
        for err in errors:
            self.assertIsInstance(err, PreconditionError)
            self.assertIsInstance(err, ValueError)

    def test_invalid_rank_message_and_attributes(self):
        err = InvalidRankError("filter", 4, 3)
        self.assertEqual(str(err), "`filter` rank must be 4: 3")
        self.assertEqual((err.name, err.expected, err.actual), ("filter", 4, 3))

    def test_channel_mismatch_message_names_both_counts(self):
        err = ChannelMismatchError(3, 5)
        self.assertIn("3 != 5", str(err))
        self.assertEqual(err.input_channels, 3)
        self.assertEqual(err.filter_channels, 5)

    def test_element_count_message_names_volume_and_count(self):
        err = ElementCountMismatchError((2, 3), 5)
        msg = str(err)
        self.assertIn("6", msg)
        self.assertIn("5", msg)
        self.assertEqual(err.shape, (2, 3))
        self.assertEqual(err.count, 5)

    def test_stride_message_names_entry_and_value(self):
        err = UnsupportedStrideError("strides[2]", 2, "!= 1 is not supported")
        self.assertEqual(str(err), "`strides[2]` != 1 is not supported: 2")
        self.assertEqual(err.value, 2)


if __name__ == "__main__":
    unittest.main()
